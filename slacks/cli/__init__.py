"""Command-line interface for slacks."""
