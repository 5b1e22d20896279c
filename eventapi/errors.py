"""Exceptions raised by the API layers."""


class EventApiError(Exception):
    """Base class for all eventapi errors."""


class ConfigError(EventApiError):
    """Configuration values cannot be turned into a connection."""


class DatabaseUnavailable(EventApiError):
    """The database did not answer the startup ping."""


class RepositoryError(EventApiError):
    """A query against the Event table failed or returned undecodable rows."""
