"""Summary: Generate a silent MPEG-1 Layer III stream of a given duration.
Why: Provide a valid, decodable payload to wrap in tags when creating test files.

Each frame is 128 kbit/s, 44.1 kHz, mono, without CRC. The side information
and main data are all zero, which decoders render as digital silence.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Final

from id3craft.shared.errors import ValidationError

SAMPLE_RATE: Final[int] = 44_100
BITRATE: Final[int] = 128_000
SAMPLES_PER_FRAME: Final[int] = 1152
DEFAULT_DURATION_SECONDS: Final[float] = 3.0

# Sync 0xFFF, MPEG-1, Layer III, no CRC | bitrate index 9, 44.1 kHz, no padding
# | mono, original.
FRAME_HEADER: Final[bytes] = bytes((0xFF, 0xFB, 0x90, 0xC4))
FRAME_SIZE: Final[int] = SAMPLES_PER_FRAME // 8 * BITRATE // SAMPLE_RATE


def frame_count(duration_seconds: float) -> int:
    """Return how many frames cover ``duration_seconds`` of audio."""

    if not math.isfinite(duration_seconds) or duration_seconds <= 0:
        raise ValidationError(f"Duration must be a positive number, got {duration_seconds}")
    return math.ceil(duration_seconds * SAMPLE_RATE / SAMPLES_PER_FRAME)


def silent_frame() -> bytes:
    return FRAME_HEADER + bytes(FRAME_SIZE - len(FRAME_HEADER))


def generate_silence(duration_seconds: float = DEFAULT_DURATION_SECONDS) -> bytes:
    """Return an MP3 byte stream of at least ``duration_seconds`` of silence."""

    return silent_frame() * frame_count(duration_seconds)


def write_silent_mp3(
    path: Path,
    duration_seconds: float = DEFAULT_DURATION_SECONDS,
    *,
    overwrite: bool = True,
) -> int:
    """Write a silent MP3 to ``path`` and return the number of bytes written.

    Raises:
        FileExistsError: If ``path`` exists and ``overwrite`` is False.
    """
    payload = generate_silence(duration_seconds)
    mode = "wb" if overwrite else "xb"
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, mode) as handle:
        return handle.write(payload)


__all__ = [
    "DEFAULT_DURATION_SECONDS",
    "FRAME_HEADER",
    "FRAME_SIZE",
    "frame_count",
    "generate_silence",
    "silent_frame",
    "write_silent_mp3",
]
