"""Ports for the tagging feature."""

from __future__ import annotations

from typing import Protocol

from id3craft.platform.filesystem import StrPath


class TagFileGateway(Protocol):
    """Abstract file operations needed by the tag writers."""

    def exists(self, path: StrPath) -> bool:
        """Return True when ``path`` is an existing regular file."""

        ...

    def size(self, path: StrPath) -> int:
        """Return the size of ``path`` in bytes."""

        ...

    def read_head(self, path: StrPath, count: int) -> bytes:
        """Return up to ``count`` bytes from the start of ``path``."""

        ...

    def read_tail(self, path: StrPath, count: int) -> bytes:
        """Return up to ``count`` bytes from the end of ``path``."""

        ...

    def insert_at_start(self, path: StrPath, block: bytes) -> None:
        """Atomically rewrite ``path`` as ``block`` followed by its old content."""

        ...

    def remove_from_start(self, path: StrPath, byte_count: int) -> None:
        """Atomically drop the first ``byte_count`` bytes of ``path``."""

        ...

    def append_at_end(self, path: StrPath, block: bytes) -> None:
        """Append ``block`` to ``path``."""

        ...

    def truncate_from_end(self, path: StrPath, byte_count: int) -> None:
        """Shorten ``path`` by ``byte_count`` bytes."""

        ...


__all__ = ["TagFileGateway"]
