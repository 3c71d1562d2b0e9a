"""Audio payload helpers."""

from .domain.silence import DEFAULT_DURATION_SECONDS, generate_silence, write_silent_mp3

__all__ = ["DEFAULT_DURATION_SECONDS", "generate_silence", "write_silent_mp3"]
