"""Command-line interface for dressing quotes."""
