# Where: id3craft.shared.__init__
# What: Provide a concise import surface for shared errors and dataclasses.
# Why: Encourage consistent reuse of shared types across features.

"""Shared cross-cutting types exposed at the package level."""

from .errors import (
    Id3CraftError,
    SyncsafeFormatError,
    SyncsafeRangeError,
    TargetNotFoundError,
    ValidationError,
)
from .tag_metadata import TagMetadata

__all__ = [
    "Id3CraftError",
    "SyncsafeFormatError",
    "SyncsafeRangeError",
    "TagMetadata",
    "TargetNotFoundError",
    "ValidationError",
]
