"""
Configuration error taxonomy.

Every error is local to one line; the line orchestrator converts them into
failed LineResult records and carries on with the next line.
"""

from .models import ErrorKind


class ConfigError(ValueError):
    """Base class for per-line configuration errors."""
    kind: ErrorKind = ErrorKind.GRAMMAR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GrammarError(ConfigError):
    """Missing separator, empty token or over-long line."""
    kind = ErrorKind.GRAMMAR


class ResolutionError(ConfigError):
    """Malformed, non-positive or out-of-range channel token."""
    kind = ErrorKind.RESOLUTION


class SequencingError(ConfigError):
    """Field assigned to a channel whose type was never declared."""
    kind = ErrorKind.SEQUENCING


class TypeKeywordError(ConfigError):
    """Unrecognised channel type keyword."""
    kind = ErrorKind.TYPE


class FieldError(ConfigError):
    """Field name not known for the channel's kind."""
    kind = ErrorKind.FIELD


class ValueParseError(ConfigError):
    """Value is not a number."""
    kind = ErrorKind.VALUE
