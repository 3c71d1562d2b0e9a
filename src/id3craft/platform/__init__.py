"""Platform services: logging and filesystem access."""
