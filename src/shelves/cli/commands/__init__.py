"""CLI command implementations for the shelves application.

This package contains subcommands for the shelves CLI, including:
- validate: Validate an event script
"""

from shelves.cli.commands.validate import validate_command

__all__ = ["validate_command"]
