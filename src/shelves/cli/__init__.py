"""Command-line interface for the shelf divider editor."""
