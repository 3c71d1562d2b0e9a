"""Filesystem adapter for the tagging use cases."""

from __future__ import annotations

import os

from id3craft.platform import filesystem
from id3craft.platform.filesystem import StrPath

from ..usecases.ports import TagFileGateway


class LocalTagFileGateway(TagFileGateway):
    """Thin wrapper around the local file surgery primitives."""

    def exists(self, path: StrPath) -> bool:
        return os.path.isfile(path)

    def size(self, path: StrPath) -> int:
        return filesystem.file_size(path)

    def read_head(self, path: StrPath, count: int) -> bytes:
        return filesystem.read_head(path, count)

    def read_tail(self, path: StrPath, count: int) -> bytes:
        return filesystem.read_tail(path, count)

    def insert_at_start(self, path: StrPath, block: bytes) -> None:
        filesystem.insert_at_start(path, block)

    def remove_from_start(self, path: StrPath, byte_count: int) -> None:
        filesystem.remove_from_start(path, byte_count)

    def append_at_end(self, path: StrPath, block: bytes) -> None:
        filesystem.append_at_end(path, block)

    def truncate_from_end(self, path: StrPath, byte_count: int) -> None:
        filesystem.truncate_from_end(path, byte_count)


__all__ = ["LocalTagFileGateway"]
