"""Adapters wiring tagging use cases to the local filesystem and mutagen."""

from .filesystem import LocalTagFileGateway
from .mutagen_reader import MutagenTagReader, TagSnapshot

__all__ = ["LocalTagFileGateway", "MutagenTagReader", "TagSnapshot"]
