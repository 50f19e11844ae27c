import tomllib
from pathlib import Path
from typing import Annotated

import tomlkit
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from decifix.constants import DEFAULT_STORAGE
from decifix.logging import logger
from decifix.validation.int_values import ValidatedKindName

CONFIG_DIR = Path.home() / ".config" / "decifix"
CONFIG_FILE = CONFIG_DIR / "config.toml"


class LiteralSettings(BaseModel):
    # Storage kind for literals written without a suffix, e.g. "1.25" instead of "1.25u16"
    default_storage: ValidatedKindName = DEFAULT_STORAGE


class FormattingSettings(BaseModel):
    # Digits shown by the CLI when printing float conversions
    float_digits: Annotated[int, Field(ge=0, le=17)] = 6


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DECIFIX_",
        env_nested_delimiter="__",
    )

    literal: LiteralSettings = LiteralSettings()
    formatting: FormattingSettings = FormattingSettings()


def load_config_from_file(config_path: Path) -> Settings:
    return Settings.model_validate(
        tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    if not config_path.parent.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created a configuration directory at {config_path.parent}.")

    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )
    logger.info(f"Saved configuration to {config_path}.")


settings = load_config_from_file(CONFIG_FILE) if CONFIG_FILE.exists() else Settings()
