"""User interfaces for id3craft."""
