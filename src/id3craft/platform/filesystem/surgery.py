"""Summary: Byte-level rewrites at the start or end of an existing file.
Why: Insert and strip tag blocks without ever leaving a half-written file behind.

Start-of-file edits stream the data into a sibling temporary file and commit
with ``os.replace``; the rename is the only point at which the original path
changes. End-of-file edits append or truncate in place because they cannot
disturb the bytes that stay.

Symbolic links are followed: start-of-file edits rewrite the file the link
points at and leave the link itself in place.

Callers must be the only writer of the target path for the duration of a call.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from id3craft.platform.logging import logger
from id3craft.shared.errors import ValidationError

COPY_BUFFER_SIZE = 80 * 1024

StrPath = str | os.PathLike[str]


def file_size(path: StrPath) -> int:
    """Return the size of ``path`` in bytes."""

    return os.stat(path).st_size


def read_head(path: StrPath, count: int) -> bytes:
    """Return up to ``count`` bytes from the start of ``path``."""

    with open(path, "rb") as handle:
        return handle.read(count)


def read_tail(path: StrPath, count: int) -> bytes:
    """Return the last ``count`` bytes of ``path`` (fewer if the file is shorter)."""

    with open(path, "rb") as handle:
        size = handle.seek(0, os.SEEK_END)
        _ = handle.seek(max(0, size - count))
        return handle.read(count)


@contextmanager
def _replacement_file(path: Path) -> Iterator[BinaryIO]:
    """Yield a sibling temporary file that replaces ``path`` on clean exit.

    The temporary file is deleted on every exit path that does not commit.
    """

    handle = tempfile.NamedTemporaryFile(
        mode="wb",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    )
    temp_path = Path(handle.name)
    try:
        with handle:
            yield handle
            handle.flush()
            os.fsync(handle.fileno())
        shutil.copymode(path, temp_path)
        os.replace(temp_path, path)
    finally:
        if temp_path.exists():
            temp_path.unlink()


def insert_at_start(path: StrPath, block: bytes) -> None:
    """Rewrite ``path`` so that it starts with ``block``."""

    if not block:
        return

    target = Path(path).resolve()
    with _replacement_file(target) as temp:
        _ = temp.write(block)
        with open(target, "rb") as source:
            shutil.copyfileobj(source, temp, COPY_BUFFER_SIZE)
    logger.debug("Inserted %d bytes at start of %s", len(block), target)


def remove_from_start(path: StrPath, byte_count: int) -> None:
    """Drop the first ``byte_count`` bytes of ``path``.

    Removing as many bytes as the file holds, or more, leaves an empty file.
    """

    if byte_count <= 0:
        return

    target = Path(path).resolve()
    with _replacement_file(target) as temp:
        with open(target, "rb") as source:
            _ = source.seek(byte_count)
            shutil.copyfileobj(source, temp, COPY_BUFFER_SIZE)
    logger.debug("Removed %d bytes from start of %s", byte_count, target)


def append_at_end(path: StrPath, block: bytes) -> None:
    """Append ``block`` to ``path``."""

    if not block:
        return

    with open(path, "ab") as handle:
        _ = handle.write(block)
    logger.debug("Appended %d bytes to %s", len(block), path)


def truncate_from_end(path: StrPath, byte_count: int) -> None:
    """Shorten ``path`` by ``byte_count`` bytes.

    Raises:
        ValidationError: If ``byte_count`` is negative or larger than the file.
    """

    size = file_size(path)
    if byte_count < 0 or byte_count > size:
        raise ValidationError(
            f"Cannot truncate {byte_count} bytes from a {size}-byte file: {path}"
        )

    os.truncate(path, size - byte_count)
    logger.debug("Truncated %d bytes from end of %s", byte_count, path)


__all__ = [
    "COPY_BUFFER_SIZE",
    "StrPath",
    "append_at_end",
    "file_size",
    "insert_at_start",
    "read_head",
    "read_tail",
    "remove_from_start",
    "truncate_from_end",
]
