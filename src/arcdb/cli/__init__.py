"""Command-line interface for arc-db."""
