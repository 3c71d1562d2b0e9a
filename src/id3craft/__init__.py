"""id3craft - write, strip and inspect ID3v1 and ID3v2.4 tags in MP3 files."""

__version__ = "0.1.0"
