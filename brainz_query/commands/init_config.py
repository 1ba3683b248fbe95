"""Write a brainz-query configuration file."""

from __future__ import annotations

from pathlib import Path

import click

from brainz_query.config import (
    DEFAULT_ENTITY,
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    Config,
    get_default_config_path,
    save_config,
)
from brainz_query.context import Context, pass_context
from brainz_query.utils.output import error, info, success, warning


@click.command("init-config")
@click.option(
    "--default-entity",
    "-e",
    default=DEFAULT_ENTITY,
    show_default=True,
    help="Entity that build searches when none is given",
)
@click.option(
    "--limit",
    type=int,
    default=DEFAULT_LIMIT,
    show_default=True,
    help="Page size printed by build --format params",
)
@click.option(
    "--offset",
    type=int,
    default=DEFAULT_OFFSET,
    show_default=True,
    help="Result offset printed by build --format params",
)
@click.option(
    "--plain",
    is_flag=True,
    default=False,
    help="Turn colored output off in the written config",
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite existing config file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Output path for config file (default: ~/.config/brainz-query/config.toml)",
)
@pass_context
def cli(
    ctx: Context,
    default_entity: str,
    limit: int,
    offset: int,
    plain: bool,
    force: bool,
    output: Path | None,
) -> None:
    """Create a configuration file for build.

    Values outside their valid range are corrected with a warning, so
    the written file always loads cleanly.

    Examples:

    \b
      # Write the defaults to ~/.config/brainz-query/config.toml
      brainz-query init-config

    \b
      # Default to release groups, 100 results per page
      brainz-query init-config --default-entity release-group --limit 100

    \b
      # Replace a config at a custom location
      brainz-query init-config --force --output ./brainz.toml
    """
    config_path = (output or get_default_config_path()).expanduser().resolve()

    if config_path.exists() and not force:
        error(
            f"Config file already exists: {config_path}",
            hint="Use --force to overwrite",
        )
        raise SystemExit(1)

    config = Config(
        colored_output=not plain,
        default_entity=default_entity,
        limit=limit,
        offset=offset,
    )
    for message in config.validate():
        if not ctx.quiet:
            warning(message)

    try:
        save_config(config, config_path)
    except OSError as e:
        error(f"Failed to write config file: {e}")
        raise SystemExit(1) from None

    success(f"Created config file: {config_path}")
    info(
        f"build searches {config.default_entity} by default, "
        f"{config.limit} results from offset {config.offset}."
    )
