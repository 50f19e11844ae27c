from pathlib import Path

import click
import pydantic

from decifix.cli import cli
from decifix.codegen import load_literal_definitions, write_constants_module
from decifix.config import settings
from decifix.exceptions import DecifixError, UnsupportedConversion
from decifix.fixed_point import parse_fixed_point
from decifix.integer_kinds import INTEGER_KINDS
from decifix.literal import literal_components, render_literal

KIND_CHOICE = click.Choice(list(INTEGER_KINDS), case_sensitive=False)


@cli.command("parse")
@click.argument("value")
@click.option(
    "--storage",
    type=KIND_CHOICE,
    default="i32",
    show_default=True,
    help="Integer kind holding the stored value",
)
@click.option(
    "--precision",
    type=click.IntRange(0, 255),
    required=True,
    help="Number of decimal digits",
)
@click.option("--float", "show_float", is_flag=True, help="Also show the float conversion")
def parse(value: str, storage: str, precision: int, *, show_float: bool) -> None:
    """
    Parse VALUE and display its canonical form and stored integer.
    """

    try:
        fixed_point = parse_fixed_point(value, storage, precision)
    except DecifixError as exc:
        raise click.ClickException(str(exc)) from None

    click.echo(f"{fixed_point} (stored {fixed_point.stored})")
    if show_float:
        try:
            click.echo(f"{float(fixed_point):.{settings.formatting.float_digits}f}")
        except UnsupportedConversion as exc:
            raise click.ClickException(str(exc)) from None


@cli.command("literal")
@click.argument("token")
@click.option(
    "--precision",
    type=click.IntRange(0, 255),
    default=None,
    help="Number of decimal digits (inferred from TOKEN if omitted)",
)
def literal(token: str, precision: int | None) -> None:
    """
    Evaluate a literal TOKEN such as 1.25u16 and display its value and constant expression.
    """

    try:
        components = literal_components(token, precision)
    except DecifixError as exc:
        raise click.ClickException(str(exc)) from None

    click.echo(f"{components.to_fixed_point()}")
    click.echo(render_literal(token, precision))


@cli.command("codegen")
@click.argument(
    "definitions",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the generated module to this path instead of the definitions file's sibling",
)
def codegen(definitions: Path, output: Path | None) -> None:
    """
    Generate a Python module of fixed-point constants from the [constants] table of a TOML file.
    """

    if output is None:
        output = definitions.with_suffix(".py")

    try:
        write_constants_module(load_literal_definitions(definitions), output)
    except (DecifixError, pydantic.ValidationError) as exc:
        raise click.ClickException(str(exc)) from None

    click.echo(f"Wrote {output}")
