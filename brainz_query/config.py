"""Configuration management for brainz-query."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from brainz_query.exceptions import (
    ConfigParseError,
    ConfigValidationError,
    UnknownEntityError,
)
from brainz_query.search.registry import SEARCHES, get_search
from brainz_query.utils.fileops import write_private_file

DEFAULT_ENTITY = "artist"
DEFAULT_LIMIT = 25
DEFAULT_OFFSET = 0
MAX_LIMIT = 100


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "brainz-query" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        colored_output: Whether to use colored terminal output.
        default_entity: Entity searched by ``build`` when none is given.
        limit: Result page size printed with ``--format params``.
        offset: Result offset printed with ``--format params``.
        config_path: Path where config was loaded from (None if defaults).
    """

    colored_output: bool = True
    default_entity: str = DEFAULT_ENTITY
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET
    config_path: Path | None = None

    def validate(self) -> list[str]:
        """Validate configuration values.

        Out-of-range values are clamped into range.

        Returns:
            List of warning messages for non-fatal issues.
        """
        warnings: list[str] = []

        if not 1 <= self.limit <= MAX_LIMIT:
            clamped = min(max(self.limit, 1), MAX_LIMIT)
            warnings.append(
                f"search.limit={self.limit} is outside valid range 1-{MAX_LIMIT}, using {clamped}"
            )
            self.limit = clamped

        if self.offset < 0:
            warnings.append(f"search.offset={self.offset} is negative, using 0")
            self.offset = 0

        try:
            self.default_entity = get_search(self.default_entity).entity
        except UnknownEntityError:
            warnings.append(
                f"search.default_entity={self.default_entity!r} is not one of "
                f"{', '.join(sorted(SEARCHES))}, using {DEFAULT_ENTITY!r}"
            )
            self.default_entity = DEFAULT_ENTITY

        return warnings


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    A missing config file is not an error: the defaults are used
    silently, since every setting is optional.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        config = Config()
        return config, config.validate()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    return config, config.validate()


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    # Parse [search] section
    search = data.get("search", {})
    if "default_entity" in search:
        value = search["default_entity"]
        if not isinstance(value, str):
            raise ConfigValidationError("search.default_entity", value, "must be a string")
        config.default_entity = value

    # bool is an int subclass, reject it explicitly
    if "limit" in search:
        value = search["limit"]
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigValidationError("search.limit", value, "must be an integer")
        config.limit = value

    if "offset" in search:
        value = search["offset"]
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigValidationError("search.offset", value, "must be an integer")
        config.offset = value

    return config


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()

    data: dict[str, Any] = {
        "display": {
            "colored_output": config.colored_output,
        },
        "search": {
            "default_entity": config.default_entity,
            "limit": config.limit,
            "offset": config.offset,
        },
    }

    write_private_file(config_path, tomli_w.dumps(data))
