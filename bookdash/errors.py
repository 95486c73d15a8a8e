"""Errors raised by the dashboard core."""


class LoadError(Exception):
    """Raised when the dataset cannot be read or lacks required columns."""


class InvalidQuery(ValueError):
    """Raised when a title search is attempted with blank text."""
