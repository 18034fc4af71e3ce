"""Handler abstractions for simulated git subcommands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from gitsim.model import RepositoryModel


@dataclass(frozen=True)
class CommandResult:
    """Result of interpreting one command line.

    Attributes:
        name: Command name that produced the result, when known.
        success: Whether the command was applied.
        lines: Output lines, in display order.
        error: The error line when the command failed.
        activity: Short description of a state change for the activity log.
    """

    name: str | None
    success: bool
    lines: list[str] = field(default_factory=list)
    error: str | None = None
    activity: str | None = None

    @classmethod
    def failure(cls, name: str | None, message: str) -> CommandResult:
        """Build a failed result whose only output line is ``message``."""

        return cls(name=name, success=False, lines=[message], error=message)


class CommandHandler(ABC):
    """Base class for subcommand handlers.

    Handlers check every precondition before calling a mutation on the
    model, so a failed command leaves the model untouched.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the command name handled, e.g. ``"stash pop"``."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Return a human-readable description of the command."""

    @abstractmethod
    def execute(self, model: RepositoryModel, command: Any) -> CommandResult:
        """Apply the parsed command to the model.

        Args:
            model: Repository model to read and mutate.
            command: Parsed command whose ``name`` matches this handler.

        Returns:
            CommandResult describing the outcome.
        """
