"""Command-line interface for dirtree."""
