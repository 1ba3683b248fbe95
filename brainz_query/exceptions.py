"""Exception hierarchy for brainz-query."""

from pathlib import Path


class BrainzQueryError(Exception):
    """Base exception for all brainz-query errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all brainz-query errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(BrainzQueryError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Search Errors
class SearchError(BrainzQueryError):
    """Search construction errors."""

    pass


class UnregisteredFieldError(SearchError):
    """A combinator was applied to a field not registered in the search.

    This is always a programming error: the field handle was already
    consumed by another combinator, or belongs to a different search.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Field {field} {reason}")


class UnknownEntityError(SearchError):
    """No search builder exists for the entity name."""

    def __init__(self, entity: str) -> None:
        self.entity = entity
        super().__init__(f"Unknown search entity: {entity}")


class UnknownFieldError(SearchError):
    """The entity has no search field with this name."""

    def __init__(self, entity: str, field: str) -> None:
        self.entity = entity
        self.field = field
        super().__init__(f"Unknown {entity} search field: {field}")


class TermValueError(SearchError):
    """A command-line search term could not be interpreted."""

    def __init__(self, term: str, reason: str) -> None:
        self.term = term
        self.reason = reason
        super().__init__(f"Invalid search term '{term}': {reason}")
