"""List the search fields of an entity."""

from __future__ import annotations

import click

from brainz_query.context import Context, pass_context
from brainz_query.exceptions import UnknownEntityError
from brainz_query.search.registry import SEARCHES, get_search
from brainz_query.utils.output import console, create_table, error


@click.command("fields")
@click.argument("entity")
@pass_context
def cli(ctx: Context, entity: str) -> None:
    """Show the search fields of ENTITY.

    The helper name and the wire name are both accepted by the
    build command.

    Examples:

    \b
      brainz-query fields artist
      brainz-query fields release-group
    """
    try:
        search_cls = get_search(entity)
    except UnknownEntityError as e:
        error(str(e), hint=f"Known entities: {', '.join(sorted(SEARCHES))}")
        raise SystemExit(2)

    table = create_table(title=f"{search_cls.entity} search fields")
    table.add_column("Helper", style="field.helper", no_wrap=True)
    table.add_column("Field", style="field.wire", no_wrap=True)
    table.add_column("Description")

    for field in search_cls.fields:
        table.add_row(field.helper_name, field.value or "(default)", field.description)

    console.print(table)
