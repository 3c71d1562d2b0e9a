"""Configuration loading and path discovery for id3craft."""
