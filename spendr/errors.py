"""Exceptions raised by spendr."""


class SpendrError(Exception):
    """Base class for all spendr errors."""


class ValidationError(SpendrError, ValueError):
    """Raised when an expense or filter value fails validation.

    The message is the single user-facing explanation.
    """


class PersistenceReadError(SpendrError):
    """Raised when the expense store can't be read or parsed."""


class PersistenceWriteError(SpendrError):
    """Raised when the expense store can't be written."""


class ConfigError(SpendrError):
    """Raised when the configuration file is malformed."""
