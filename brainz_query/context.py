"""Shared click context for brainz-query commands."""

from __future__ import annotations

import click

from brainz_query.config import Config


class Context:
    """Shared context for all commands."""

    def __init__(self) -> None:
        self.config: Config = Config()
        self.quiet: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)
