"""
Error types raised by the findword pipeline.

Every error is fatal at the point of detection: the CLI reports it and exits,
nothing is retried and no partial results are printed.
"""

from __future__ import annotations


class FindWordError(Exception):
    """Base class for all findword errors."""


class InvalidShelfError(FindWordError, ValueError):
    """Shelf is empty or holds something other than a-z and '_'."""


class MissingRequiredOptionError(FindWordError, ValueError):
    """Shelf missing, or neither a pattern nor interactive mode given."""


class PatternCompileError(FindWordError, ValueError):
    """Board pattern cannot be turned into a matcher."""


class InvalidCharacterError(FindWordError, ValueError):
    """Non a-z character reached the scorer."""


class DictionaryError(FindWordError):
    """Word list could not be used."""


class DictionaryNotFoundError(DictionaryError, FileNotFoundError):
    pass


class DictionaryReadError(DictionaryError, OSError):
    pass
