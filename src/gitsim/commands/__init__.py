"""Command parsing and dispatch for the git simulator."""

from gitsim.commands.base import CommandHandler, CommandResult
from gitsim.commands.builtins import build_default_command_registry
from gitsim.commands.parsing import Command, ParseError, parse_command
from gitsim.commands.registry import (
    CommandNotFoundError,
    CommandRegistrationError,
    CommandRegistry,
    CommandRegistryError,
)

__all__ = [
    "Command",
    "CommandHandler",
    "CommandNotFoundError",
    "CommandRegistrationError",
    "CommandRegistry",
    "CommandRegistryError",
    "CommandResult",
    "ParseError",
    "build_default_command_registry",
    "parse_command",
]
