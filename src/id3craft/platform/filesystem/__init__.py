"""Filesystem primitives shared across features."""

from .surgery import (
    COPY_BUFFER_SIZE,
    StrPath,
    append_at_end,
    file_size,
    insert_at_start,
    read_head,
    read_tail,
    remove_from_start,
    truncate_from_end,
)

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
