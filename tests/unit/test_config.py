"""Unit tests for configuration."""

import tomllib
from pathlib import Path

import pytest

from brainz_query.config import Config, load_config, save_config
from brainz_query.exceptions import ConfigParseError, ConfigValidationError


def test_default_config() -> None:
    """Test that default config has sensible values."""
    config = Config()
    assert config.colored_output is True
    assert config.default_entity == "artist"
    assert config.limit == 25
    assert config.offset == 0


def test_load_missing_config(temp_dir: Path) -> None:
    """A missing config file silently yields the defaults."""
    config, warnings = load_config(temp_dir / "nonexistent.toml")

    assert config == Config()
    assert warnings == []


def test_load_valid_config(sample_config: Path) -> None:
    """Test loading a valid config file."""
    config, warnings = load_config(sample_config)

    assert warnings == []
    assert config.colored_output is False
    assert config.default_entity == "release-group"
    assert config.limit == 50
    assert config.offset == 10
    assert config.config_path == sample_config.resolve()


def test_load_invalid_toml(temp_dir: Path) -> None:
    """Test loading invalid TOML raises error."""
    config_path = temp_dir / "invalid.toml"
    config_path.write_text("this is not valid [ toml")

    with pytest.raises(ConfigParseError):
        load_config(config_path)


def test_config_validation_invalid_type(temp_dir: Path) -> None:
    """Test that invalid types raise validation error."""
    config_path = temp_dir / "bad_types.toml"
    config_path.write_text("""[display]
colored_output = "not a boolean"
""")

    with pytest.raises(ConfigValidationError):
        load_config(config_path)


@pytest.mark.parametrize("value", ["true", '"25"', "2.5"])
def test_limit_must_be_integer(temp_dir: Path, value: str) -> None:
    config_path = temp_dir / "limit.toml"
    config_path.write_text(f"[search]\nlimit = {value}\n")

    with pytest.raises(ConfigValidationError) as exc_info:
        load_config(config_path)
    assert exc_info.value.key == "search.limit"


def test_limit_out_of_range_warns(temp_dir: Path) -> None:
    config_path = temp_dir / "range.toml"
    config_path.write_text("[search]\nlimit = 500\noffset = -3\n")

    config, warnings = load_config(config_path)

    assert config.limit == 100
    assert config.offset == 0
    assert len(warnings) == 2
    assert "search.limit=500" in warnings[0]


def test_unknown_default_entity_warns(temp_dir: Path) -> None:
    config_path = temp_dir / "entity.toml"
    config_path.write_text('[search]\ndefault_entity = "spaceship"\n')

    config, warnings = load_config(config_path)

    assert config.default_entity == "artist"
    assert len(warnings) == 1
    assert "spaceship" in warnings[0]


def test_default_entity_alias_normalized(temp_dir: Path) -> None:
    config_path = temp_dir / "entity.toml"
    config_path.write_text('[search]\ndefault_entity = "release_group"\n')

    config, warnings = load_config(config_path)

    assert config.default_entity == "release-group"
    assert warnings == []


def test_save_and_reload(temp_dir: Path) -> None:
    config = Config(colored_output=False, default_entity="recording", limit=100, offset=200)
    config_path = temp_dir / "saved" / "config.toml"

    save_config(config, config_path)
    loaded, warnings = load_config(config_path)

    assert warnings == []
    assert loaded.colored_output is False
    assert loaded.default_entity == "recording"
    assert loaded.limit == 100
    assert loaded.offset == 200


def test_save_writes_every_setting(temp_dir: Path) -> None:
    config_path = temp_dir / "config.toml"

    save_config(Config(), config_path)

    data = tomllib.loads(config_path.read_text())
    assert data["display"] == {"colored_output": True}
    assert data["search"] == {"default_entity": "artist", "limit": 25, "offset": 0}
    assert config_path.stat().st_mode & 0o777 == 0o600
