"""CLI command implementations for the dressing application.

This package contains subcommands for the dressing CLI, including:
- validate: Validate a pricing configuration file
"""

from dressing.cli.commands.validate import validate_command

__all__ = ["validate_command"]
