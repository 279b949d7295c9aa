"""Command-line interface for regionpatch."""
