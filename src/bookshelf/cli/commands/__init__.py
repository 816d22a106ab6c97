"""CLI command implementations for the bookshelf application.

This package contains subcommands for the bookshelf CLI, including:
- validate: Validate a configuration file
"""

from bookshelf.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
