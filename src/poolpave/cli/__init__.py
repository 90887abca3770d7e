"""Command-line interface for poolpave."""
