import click
import tomlkit
from pydantic import TypeAdapter

from decifix.cli import cli
from decifix.config import CONFIG_FILE, save_config_to_file, settings


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command("show")
@click.option(
    "--json",
    "output_format",
    flag_value="json",
    type=str,
    help="Show configuration in JSON format",
)
@click.option(
    "--toml",
    "output_format",
    flag_value="toml",
    type=str,
    help="Show configuration in TOML format (default)",
    default=True,
)
def config_show(output_format: str) -> None:
    """
    Display the current configuration in JSON or TOML (default) format.
    """

    match output_format:
        case "json":
            click.echo(
                TypeAdapter(dict).dump_json(
                    settings.model_dump(),
                    indent=2,
                ),
            )
        case "toml":
            click.echo(
                tomlkit.dumps(
                    settings.model_dump(),
                ),
            )
        case _:
            ...


@config.command("init")
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def config_init(*, force: bool) -> None:
    """
    Write the current configuration to the configuration file.
    """

    if (
        not CONFIG_FILE.exists()
        or force
        or click.confirm(
            f"A configuration file already exists at {CONFIG_FILE}. Do you want to overwrite it?",
            default=False,
        )
    ):
        save_config_to_file(settings, CONFIG_FILE)
    else:
        raise click.Abort
