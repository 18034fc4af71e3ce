"""Interpret command lines against a repository model."""

from __future__ import annotations

from gitsim.commands.base import CommandResult
from gitsim.commands.builtins import build_default_command_registry
from gitsim.commands.parsing import ParseError, parse_command
from gitsim.commands.registry import CommandNotFoundError, CommandRegistry
from gitsim.model import RepositoryModel
from gitsim.util.logging import get_logger
from gitsim.util.observability import ObservabilityManager, create_observability_manager

_LOGGER = get_logger("gitsim.interpreter")


class CommandInterpreter:
    """Parses, validates and applies one command line at a time.

    The interpreter holds no repository state of its own; the model is passed
    to every call. Failures are returned as output lines and never leave the
    model partially mutated.
    """

    def __init__(
        self,
        registry: CommandRegistry | None = None,
        observability: ObservabilityManager | None = None,
    ) -> None:
        """Initialize the interpreter.

        Args:
            registry: Handlers to dispatch to. Defaults to every built-in subcommand.
            observability: Event logger and metrics sink.
        """

        self._registry = registry or build_default_command_registry()
        self._observability = observability or create_observability_manager()

    @property
    def observability(self) -> ObservabilityManager:
        return self._observability

    def execute(self, model: RepositoryModel, line: str) -> CommandResult:
        """Interpret a single input line.

        Args:
            model: Repository model to read and mutate.
            line: Raw command line, e.g. ``git commit -m "msg"``.

        Returns:
            CommandResult with the output lines. A blank line yields an empty,
            successful result.
        """

        if not line.strip():
            return CommandResult(name=None, success=True)

        parsed = parse_command(line)
        if isinstance(parsed, ParseError):
            result = CommandResult.failure(parsed.name, parsed.message)
        else:
            with self._observability.track_duration(f"command.{parsed.name}"):
                try:
                    result = self._registry.execute(model, parsed)
                except CommandNotFoundError:
                    _LOGGER.debug("No handler registered for %s", parsed.name)
                    result = CommandResult.failure(
                        parsed.name, f"git: '{parsed.name}' not implemented in simulation"
                    )
        self._record(result)
        return result

    def _record(self, result: CommandResult) -> None:
        metrics = self._observability.metrics
        metrics.increment("commands")
        if not result.success:
            metrics.increment("failures")
        self._observability.log_event(
            "command.executed",
            {"command": result.name, "success": result.success, "error": result.error},
        )
