"""Pure audio payload generators."""
