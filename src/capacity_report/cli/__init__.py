"""Command-line interface for capacity reporting."""
