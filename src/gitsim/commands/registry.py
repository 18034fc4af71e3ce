"""Registry mapping command names to handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from gitsim.commands.base import CommandHandler, CommandResult
from gitsim.model import RepositoryModel


class CommandRegistryError(RuntimeError):
    """Raised when command registry operations fail."""


class CommandNotFoundError(CommandRegistryError):
    """Raised when no handler is registered for a command name."""


class CommandRegistrationError(CommandRegistryError):
    """Raised when a handler cannot be registered."""


@dataclass
class CommandRegistry:
    """Registry for command handler instances.

    Attributes:
        _handlers: Mapping of command names to handlers.
    """

    _handlers: dict[str, CommandHandler]

    def __init__(self) -> None:
        self._handlers = {}

    def register(self, handler: CommandHandler) -> None:
        """Register a handler by the command name it serves.

        Args:
            handler: Handler to register.

        Raises:
            CommandRegistrationError: If a handler with the same name already exists.
        """

        if handler.name in self._handlers:
            raise CommandRegistrationError(f"Command '{handler.name}' is already registered")
        self._handlers[handler.name] = handler

    def get(self, name: str) -> CommandHandler:
        """Retrieve a handler by command name.

        Raises:
            CommandNotFoundError: If no handler exists with the given name.
        """

        try:
            return self._handlers[name]
        except KeyError as exc:
            raise CommandNotFoundError(f"Command '{name}' is not registered") from exc

    def list_handlers(self) -> Iterable[CommandHandler]:
        """Return all registered handlers."""

        return list(self._handlers.values())

    def execute(self, model: RepositoryModel, command: Any) -> CommandResult:
        """Dispatch a parsed command to its handler.

        Raises:
            CommandNotFoundError: If no handler serves ``command.name``.
        """

        handler = self.get(command.name)
        return handler.execute(model, command)
