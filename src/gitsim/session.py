"""Host-side session wrapping a repository model and its terminal."""

from __future__ import annotations

from typing import Callable

from gitsim.activity import ActivityEntry, ActivityLog
from gitsim.commands.base import CommandResult
from gitsim.config import SimulatorConfig, build_repository
from gitsim.interpreter import CommandInterpreter
from gitsim.model import RepositoryModel, random_commit_id
from gitsim.util.logging import get_logger
from gitsim.view import WorkspaceView, build_workspace_view

_LOGGER = get_logger("gitsim.session")


class SimulatorSession:
    """Owns one simulated repository together with its scrollback.

    Each submitted line is echoed as ``$ <line>`` followed by the command
    output. State-changing commands also add an entry to the activity log.
    """

    def __init__(
        self,
        config: SimulatorConfig | None = None,
        interpreter: CommandInterpreter | None = None,
        id_factory: Callable[[], str] = random_commit_id,
    ) -> None:
        """Initialize a session seeded from configuration.

        Args:
            config: Simulator configuration. Defaults to the demo seed.
            interpreter: Interpreter to run commands with.
            id_factory: Commit id generator passed to the model.
        """

        self._config = config or SimulatorConfig()
        self._interpreter = interpreter or CommandInterpreter()
        self._id_factory = id_factory
        self._model = build_repository(self._config, id_factory=id_factory)
        self._scrollback: list[str] = []
        self._activity = ActivityLog(self._config.session.activity_limit)

    @property
    def model(self) -> RepositoryModel:
        return self._model

    @property
    def interpreter(self) -> CommandInterpreter:
        return self._interpreter

    def submit(self, line: str) -> CommandResult | None:
        """Run one input line and append it and its output to the scrollback.

        Args:
            line: Raw input line.

        Returns:
            The command result, or None when the line was blank.
        """

        line = line.strip()
        if not line:
            return None
        self._scrollback.append(f"$ {line}")
        result = self._interpreter.execute(self._model, line)
        self._scrollback.extend(result.lines)
        if result.activity:
            self._activity.append(result.activity)
            _LOGGER.info(result.activity)
        return result

    def scrollback(self) -> list[str]:
        """Return every line printed so far."""

        return list(self._scrollback)

    def activity(self) -> list[ActivityEntry]:
        """Return activity entries, newest first."""

        return self._activity.recent()

    def view(self) -> WorkspaceView:
        """Return the explorer read model for the current state."""

        return build_workspace_view(self._model, self._config.session.recent_commits)

    def reset(self) -> None:
        """Discard all state and reseed the repository."""

        self._model = build_repository(self._config, id_factory=self._id_factory)
        self._scrollback.clear()
        self._activity.clear()
        _LOGGER.info("Simulator session reset")
