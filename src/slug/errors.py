"""Errors raised by slug generation.

Only argument validation can fail. Malformed input text, such as lone
surrogates, is repaired rather than rejected.
"""


class SlugError(Exception):
    """Base class for slug errors."""


class InvalidArgumentError(SlugError, TypeError):
    """Raised when slug() receives an argument of the wrong type."""


class UnknownModeError(SlugError, ValueError):
    """Raised when the requested mode has no preset."""


class MapFileError(SlugError):
    """Raised when a custom substitution map file cannot be read."""


def describe_type(value: object) -> str:
    """Name the type of a rejected argument for error messages."""
    if value is None:
        return "None"
    return type(value).__name__
