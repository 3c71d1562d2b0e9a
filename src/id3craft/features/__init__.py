"""Feature packages for id3craft."""
