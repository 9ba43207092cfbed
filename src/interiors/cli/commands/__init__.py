"""CLI command implementations for the interiors application.

This package contains subcommands for the interiors CLI:
- validate: Validate a configuration file
- layout: Print the resolved interior layout
"""

from interiors.cli.commands.layout import layout_command
from interiors.cli.commands.validate import validate_command

__all__ = ["layout_command", "validate_command"]
