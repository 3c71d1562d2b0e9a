"""Summary: Pure byte-layout helpers for the ID3v1 and ID3v2 tag formats.
Why: Keep encoding rules free of filesystem access so they stay easy to test.
"""

from . import frames, header, syncsafe, trailer

__all__ = ["frames", "header", "syncsafe", "trailer"]
