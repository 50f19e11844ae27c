import pydantic
import pytest

from decifix.config import (
    FormattingSettings,
    LiteralSettings,
    Settings,
    load_config_from_file,
    save_config_to_file,
)


def test_default_settings():
    config = Settings()
    assert config.literal.default_storage == "i32"
    assert config.formatting.float_digits == 6


def test_environment_override(monkeypatch):
    monkeypatch.setenv("DECIFIX_LITERAL__DEFAULT_STORAGE", "U64")
    assert Settings().literal.default_storage == "u64"


def test_invalid_settings():
    with pytest.raises(pydantic.ValidationError, match="Unknown integer kind"):
        LiteralSettings(default_storage="u7")
    with pytest.raises(pydantic.ValidationError):
        FormattingSettings(float_digits=18)
    with pytest.raises(pydantic.ValidationError):
        FormattingSettings(float_digits=-1)


def test_save_and_load(tmp_path):
    config_path = tmp_path / "nested" / "config.toml"
    config = Settings(
        literal=LiteralSettings(default_storage="u16"),
        formatting=FormattingSettings(float_digits=3),
    )

    save_config_to_file(config, config_path)
    assert config_path.exists()
    assert "[literal]" in config_path.read_text()

    loaded = load_config_from_file(config_path)
    assert loaded.literal.default_storage == "u16"
    assert loaded.formatting.float_digits == 3


def test_load_partial_file(tmp_path):
    config_path = tmp_path / "config.toml"
    config_path.write_text('[literal]\ndefault_storage = "i64"\n')

    loaded = load_config_from_file(config_path)
    assert loaded.literal.default_storage == "i64"
    assert loaded.formatting.float_digits == 6
