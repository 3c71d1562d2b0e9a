"""Summary: Encode and decode 28-bit syncsafe integers.
Why: ID3v2 size fields must never contain a byte that looks like an MPEG sync marker.
"""

from __future__ import annotations

from typing import Final

from id3craft.shared.errors import SyncsafeFormatError, SyncsafeRangeError

MAX_VALUE: Final[int] = 0x0FFFFFFF
WIDTH: Final[int] = 4
_BITS_PER_BYTE: Final[int] = 7
_BYTE_MASK: Final[int] = 0x7F


def encode(value: int) -> bytes:
    """Pack ``value`` into four bytes carrying seven bits each, big-endian."""

    if value < 0 or value > MAX_VALUE:
        raise SyncsafeRangeError(
            f"Syncsafe value must be between 0 and {MAX_VALUE}, got {value}"
        )
    return bytes(
        (value >> (_BITS_PER_BYTE * shift)) & _BYTE_MASK
        for shift in reversed(range(WIDTH))
    )


def decode(data: bytes) -> int:
    """Unpack four syncsafe bytes.

    The high bit of each byte is assumed to be clear and is not checked.
    """

    if len(data) != WIDTH:
        raise SyncsafeFormatError(
            f"Syncsafe integer must be exactly {WIDTH} bytes, got {len(data)}"
        )
    value = 0
    for byte in data:
        value = (value << _BITS_PER_BYTE) | byte
    return value


__all__ = ["MAX_VALUE", "WIDTH", "decode", "encode"]
