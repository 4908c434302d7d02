"""Exceptions raised by the query scorer."""


class QueryScorerError(Exception):
    """Base class for scorer errors."""


class InvalidConfiguration(QueryScorerError, ValueError):
    """Bad scorer settings, e.g. a negative distance threshold."""


class InvalidDocument(QueryScorerError, ValueError):
    """A document could not be registered (missing or empty id)."""
