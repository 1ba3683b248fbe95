"""Build a search query from field=value terms."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import date

import click

from brainz_query.context import Context, pass_context
from brainz_query.exceptions import (
    SearchError,
    TermValueError,
    UnknownEntityError,
    UnknownFieldError,
)
from brainz_query.lucene.terms import TermValue, raw_term
from brainz_query.search.base import BaseSearch, FieldHandle, SearchField
from brainz_query.search.registry import get_search
from brainz_query.utils.output import error, print_query, verbose

logger = logging.getLogger(__name__)

EXIT_INVALID_TERM = 1
EXIT_UNKNOWN_NAME = 2

_TERM_PATTERN = re.compile(r"(?P<op>[+-]?)(?P<field>[A-Za-z_-]*)=(?P<value>.*)", re.DOTALL)
_INT_PATTERN = re.compile(r"-?(0|[1-9]\d*)")
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass
class SearchTerm:
    """One parsed command-line term."""

    field: SearchField
    value: TermValue
    operator: str = ""


def coerce_value(text: str, *, raw: bool = False) -> TermValue:
    """Interpret a command-line value.

    ``true``/``false`` become booleans, ISO dates become dates, integers
    become ints and everything else stays text. With ``raw`` the text is
    used as pre-escaped query syntax.

    Raises:
        TermValueError: If the value is empty or an invalid date.
    """
    if not text.strip():
        raise TermValueError(text, "value is empty")
    if raw:
        return raw_term(text)
    lowered = text.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if _INT_PATTERN.fullmatch(text):
        return int(text)
    if _DATE_PATTERN.fullmatch(text):
        try:
            return date.fromisoformat(text)
        except ValueError as e:
            raise TermValueError(text, f"invalid date ({e})") from e
    return text


def parse_term(search: type[BaseSearch], text: str, *, raw: bool = False) -> SearchTerm:
    """Parse ``[+|-]field=value`` for the given search.

    An empty field name selects the entity's default field.

    Raises:
        TermValueError: If the term is not ``field=value``.
        UnknownFieldError: If the entity has no such field.
    """
    match = _TERM_PATTERN.fullmatch(text)
    if match is None:
        raise TermValueError(text, "expected field=value")
    name = match.group("field") or "default"
    try:
        field = search.fields.lookup(name)
    except KeyError:
        raise UnknownFieldError(search.entity, name) from None
    value = coerce_value(match.group("value"), raw=raw)
    return SearchTerm(field=field, value=value, operator=match.group("op"))


def build_query(
    search_cls: type[BaseSearch], terms: list[SearchTerm], join: str = "implicit"
) -> str:
    """Populate a new search with ``terms`` and render it."""
    search = search_cls()
    handles: list[FieldHandle] = []
    for term in terms:
        handle = search.add(term.field, term.value)
        if term.operator == "+":
            handle = +handle
        elif term.operator == "-":
            handle = -handle
        handles.append(handle)

    if join != "implicit" and len(handles) > 1:
        combined = handles[0]
        for handle in handles[1:]:
            combined = combined & handle if join == "and" else combined | handle
        logger.debug("joined %d terms with %s", len(handles), join.upper())

    return search.build()


def _split_entity(default_entity: str, args: tuple[str, ...]) -> tuple[str, tuple[str, ...]]:
    # The entity is optional: a first argument without '=' names it.
    if args and "=" not in args[0]:
        return args[0], args[1:]
    return default_entity, args


@click.command(
    "build",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("args", nargs=-1, required=True, metavar="[ENTITY] TERM...")
@click.option(
    "--join",
    type=click.Choice(["and", "or", "implicit"], case_sensitive=False),
    default="implicit",
    show_default=True,
    help="How to combine the terms",
)
@click.option(
    "--raw",
    is_flag=True,
    default=False,
    help="Use values as pre-escaped query syntax",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "params"]),
    default="text",
    show_default=True,
    help="Print the query, or JSON search parameters with limit and offset",
)
@pass_context
def cli(
    ctx: Context,
    args: tuple[str, ...],
    join: str,
    raw: bool,
    output_format: str,
) -> None:
    """Build a Lucene query for a MusicBrainz entity.

    Each TERM is field=value, where field is a helper name (sort_name)
    or a wire name (sortname). Prefix a term with + to require it or
    with - to prohibit it. ENTITY defaults to the configured
    default_entity.

    Examples:

    \b
      # artist:"Jethro Tull"
      brainz-query build artist artist="Jethro Tull"

    \b
      # (artist:"The Beatles" AND releasegroup:Revolver)
      brainz-query build release-group --join and \\
          artist="The Beatles" release_group=Revolver

    \b
      # Exclude compilations
      brainz-query build release-group artist=Queen -secondary_type=compilation
    """
    entity, term_args = _split_entity(ctx.config.default_entity, args)

    try:
        search_cls = get_search(entity)
        terms = [parse_term(search_cls, text, raw=raw) for text in term_args]
    except (UnknownEntityError, UnknownFieldError) as e:
        error(str(e), hint=f"List the available fields with: brainz-query fields {entity}")
        raise SystemExit(EXIT_UNKNOWN_NAME)
    except TermValueError as e:
        error(str(e), hint="Terms look like field=value, e.g. artist=Queen")
        raise SystemExit(EXIT_INVALID_TERM)

    verbose(f"Building {search_cls.entity} query from {len(terms)} term(s)")

    try:
        query = build_query(search_cls, terms, join.lower())
    except SearchError as e:
        error(str(e))
        raise SystemExit(EXIT_INVALID_TERM)

    if output_format == "params":
        params = {
            "query": query,
            "limit": ctx.config.limit,
            "offset": ctx.config.offset,
        }
        print_query(json.dumps(params, indent=2, ensure_ascii=False))
    else:
        print_query(query)
