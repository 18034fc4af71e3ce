"""Application wiring for CLI-friendly simulator sessions."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from gitsim.config import SimulatorConfig, config_to_dict, load_config
from gitsim.session import SimulatorSession
from gitsim.util.logging import get_logger

_LOGGER = get_logger("gitsim.app")


class AppConfigError(RuntimeError):
    """Raised when configuration or session setup fails."""


def initialize_config(workspace: Path) -> Path:
    """Create a default configuration file in the workspace.

    Args:
        workspace: Directory where the config should be written.

    Returns:
        Path to the generated configuration file.

    Raises:
        AppConfigError: If the config file already exists.
    """

    workspace = workspace.resolve()
    config_path = workspace / "gitsim.yaml"
    if config_path.exists():
        raise AppConfigError(
            f"Config file already exists at {config_path}. Remove it or choose another "
            "workspace."
        )
    config_path.write_text(
        json.dumps(config_to_dict(SimulatorConfig()), indent=2),
        encoding="utf-8",
    )
    _LOGGER.info("Initialized configuration at %s", config_path)
    return config_path


def create_session(workspace: Path | None = None) -> SimulatorSession:
    """Build a session seeded from the configuration found in ``workspace``.

    Raises:
        AppConfigError: If the configuration cannot be loaded.
    """

    try:
        config = load_config(workspace)
    except (ValueError, RuntimeError) as exc:
        raise AppConfigError(str(exc)) from exc
    return SimulatorSession(config)


def run_commands(lines: Iterable[str], workspace: Path | None = None) -> SimulatorSession:
    """Run command lines in a fresh session and return it for inspection."""

    session = create_session(workspace)
    for line in lines:
        session.submit(line)
    return session


def read_script(path: Path) -> list[str]:
    """Read command lines from a script, skipping blanks and ``#`` comments.

    Raises:
        AppConfigError: If the script cannot be read.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AppConfigError(f"Unable to read script {path}: {exc}") from exc
    return [
        line.strip()
        for line in text.splitlines()
        if line.strip() and not line.strip().startswith("#")
    ]
