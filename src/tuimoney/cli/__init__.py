"""Command-line interface for tuimoney."""
