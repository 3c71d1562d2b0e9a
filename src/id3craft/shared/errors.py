"""Summary: Exception hierarchy shared by the codecs, file surgery and CLI.
Why: Let callers distinguish bad input from a missing target file.
"""

from __future__ import annotations


class Id3CraftError(Exception):
    """Base error for id3craft."""


class ValidationError(Id3CraftError, ValueError):
    """Raised when an input value cannot be encoded as requested."""


class SyncsafeRangeError(ValidationError):
    """Raised when a value does not fit into a 28-bit syncsafe integer."""


class SyncsafeFormatError(ValidationError):
    """Raised when syncsafe input is not exactly four bytes long."""


class TargetNotFoundError(Id3CraftError, FileNotFoundError):
    """Raised when the file to tag is missing or no path was given."""


__all__ = [
    "Id3CraftError",
    "SyncsafeFormatError",
    "SyncsafeRangeError",
    "TargetNotFoundError",
    "ValidationError",
]
