"""Command-line interface for ARIA."""
