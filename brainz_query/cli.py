"""Command-line interface for brainz-query."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from brainz_query import __version__
from brainz_query.config import load_config
from brainz_query.context import Context
from brainz_query.exceptions import ConfigError
from brainz_query.utils.output import (
    error,
    set_color,
    set_verbosity,
    warning,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False, path_type=Path),
    help="Path to config file (default: ~/.config/brainz-query/config.toml)",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug output and logging (implies --verbose)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress non-error output",
)
@click.version_option(version=__version__, prog_name="brainz-query")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
) -> None:
    """brainz-query: Build Lucene queries for the MusicBrainz search API.

    Each search term is a field=value pair for one entity (artist,
    release, release-group, recording, ...). Values are escaped and
    quoted as MusicBrainz expects.

    Configuration is loaded from ~/.config/brainz-query/config.toml by default.
    Use --config to specify an alternative configuration file.

    Examples:

    \b
        # A phrase search on the artist name
        brainz-query build artist artist="Jethro Tull"

    \b
        # List the fields of an entity
        brainz-query fields release-group
    """
    ctx.ensure_object(Context)
    app_ctx = ctx.obj
    app_ctx.quiet = quiet

    set_verbosity(verbose=verbose, debug=debug, quiet=quiet)

    if debug:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    # Color is disabled by --no-color, NO_COLOR env, or config
    disable_color = no_color or os.environ.get("NO_COLOR") is not None

    if disable_color:
        set_color(False)

    try:
        loaded_config, warnings = load_config(config)
    except ConfigError as e:
        error(str(e), hint="Check the file, or recreate it with: brainz-query init-config --force")
        ctx.exit(1)
        return

    app_ctx.config = loaded_config

    if not disable_color and not loaded_config.colored_output:
        set_color(False)

    if not quiet:
        for warn in warnings:
            warning(warn)


@cli.command("help")
@click.argument("command", required=False, nargs=-1)
@click.pass_context
def help_cmd(ctx: click.Context, command: tuple[str, ...]) -> None:
    """Show help for a command."""
    group = cli
    for name in command:
        cmd = group.get_command(ctx, name)
        if cmd is None:
            error(f"Unknown command: {name}")
            ctx.exit(1)
            return
        if isinstance(cmd, click.Group):
            group = cmd
        else:
            click.echo(cmd.get_help(ctx))
            return
    click.echo(group.get_help(ctx))


def register_commands() -> None:
    """Register all commands from the commands package."""
    from brainz_query.commands import discover_commands

    for command in discover_commands():
        cli.add_command(command)


# Register commands on import
register_commands()
