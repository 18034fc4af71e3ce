"""Configuration models and loaders for the git simulator."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from gitsim.activity import DEFAULT_ACTIVITY_LIMIT
from gitsim.model import (
    DEFAULT_BRANCH,
    DEMO_COMMITS,
    DEMO_TRACKED_FILES,
    DEMO_WORKING_CHANGES,
    PLACEHOLDER_EMAIL,
    PLACEHOLDER_NAME,
    Commit,
    Identity,
    RepositoryModel,
    random_commit_id,
)
from gitsim.view import DEFAULT_RECENT_COMMITS

CONFIG_FILENAMES: tuple[str, ...] = ("gitsim.yaml", "gitsim.yml", "pyproject.toml")


@dataclass(frozen=True)
class SimulatorConfig:
    """Top-level configuration for the simulator.

    Attributes:
        repository: Seed state for new repository models.
        identity: Identity used until ``git config`` changes it.
        session: Host session limits.
        logging: Logging configuration.
    """

    repository: RepositoryConfig = field(default_factory=lambda: RepositoryConfig())
    identity: IdentityConfig = field(default_factory=lambda: IdentityConfig())
    session: SessionConfig = field(default_factory=lambda: SessionConfig())
    logging: LoggingConfig = field(default_factory=lambda: LoggingConfig())


@dataclass(frozen=True)
class RepositoryConfig:
    """Seed state for the simulated repository."""

    default_branch: str = DEFAULT_BRANCH
    tracked_files: list[str] = field(default_factory=lambda: list(DEMO_TRACKED_FILES))
    working_changes: list[str] = field(default_factory=lambda: list(DEMO_WORKING_CHANGES))
    commits: list[Commit] = field(default_factory=lambda: list(DEMO_COMMITS))


@dataclass(frozen=True)
class IdentityConfig:
    name: str = PLACEHOLDER_NAME
    email: str = PLACEHOLDER_EMAIL


@dataclass(frozen=True)
class SessionConfig:
    """Limits applied by the host session."""

    activity_limit: int = DEFAULT_ACTIVITY_LIMIT
    recent_commits: int = DEFAULT_RECENT_COMMITS


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


def load_config(path: Path | None = None) -> SimulatorConfig:
    """Load simulator configuration from disk.

    Args:
        path: Optional path to a configuration file or workspace directory.

    Returns:
        Parsed SimulatorConfig with defaults applied when no config exists.
    """

    config_path = _resolve_config_path(path)
    if config_path is None:
        return SimulatorConfig()

    if config_path.suffix in {".yaml", ".yml"}:
        raw_data = _load_yaml(config_path)
    elif config_path.name == "pyproject.toml" or config_path.suffix == ".toml":
        raw_data = _load_toml(config_path)
    else:
        raise ValueError(f"Unsupported config file type: {config_path}")

    return _parse_simulator_config(raw_data)


def config_to_dict(config: SimulatorConfig) -> dict[str, Any]:
    """Serialize a SimulatorConfig into a JSON-compatible dictionary."""

    return {
        "repository": {
            "default_branch": config.repository.default_branch,
            "tracked_files": list(config.repository.tracked_files),
            "working_changes": list(config.repository.working_changes),
            "commits": [
                {
                    "id": commit.id,
                    "message": commit.message,
                    "author_name": commit.author_name,
                    "author_email": commit.author_email,
                    "pushed": commit.pushed,
                }
                for commit in config.repository.commits
            ],
        },
        "identity": {
            "name": config.identity.name,
            "email": config.identity.email,
        },
        "session": {
            "activity_limit": config.session.activity_limit,
            "recent_commits": config.session.recent_commits,
        },
        "logging": {"level": config.logging.level},
    }


def build_repository(
    config: SimulatorConfig,
    id_factory: Callable[[], str] = random_commit_id,
) -> RepositoryModel:
    """Create a freshly seeded repository model from configuration."""

    return RepositoryModel(
        branch=config.repository.default_branch,
        identity=Identity(name=config.identity.name, email=config.identity.email),
        commits=config.repository.commits,
        working_changes=config.repository.working_changes,
        tracked_files=config.repository.tracked_files,
        id_factory=id_factory,
    )


def _resolve_config_path(path: Path | None) -> Path | None:
    candidate_paths: list[Path] = []
    if path is None:
        candidate_paths.extend(Path(name) for name in CONFIG_FILENAMES)
    elif path.is_dir():
        candidate_paths.extend(path / name for name in CONFIG_FILENAMES)
    else:
        candidate_paths.append(path)

    for candidate in candidate_paths:
        if candidate.exists():
            return candidate
    return None


def _load_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        data = tomllib.load(handle)
    if path.name == "pyproject.toml":
        tool_config = data.get("tool", {}).get("gitsim", {})
        if not isinstance(tool_config, dict):
            raise ValueError("tool.gitsim must be a mapping.")
        return tool_config
    if not isinstance(data, dict):
        raise ValueError("TOML configuration must be a mapping.")
    return data


def _load_yaml(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None
    if data is not None:
        if not isinstance(data, dict):
            raise ValueError("YAML configuration must be a mapping.")
        return data
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as exc:
        raise RuntimeError(
            "PyYAML is required to parse non-JSON YAML configuration files."
        ) from exc
    parsed = yaml.safe_load(text)
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError("YAML configuration must be a mapping.")
    return parsed


def _parse_simulator_config(raw_data: dict[str, Any]) -> SimulatorConfig:
    return SimulatorConfig(
        repository=_parse_repository_config(raw_data.get("repository", {})),
        identity=_parse_identity_config(raw_data.get("identity", {})),
        session=_parse_session_config(raw_data.get("session", {})),
        logging=_parse_logging_config(raw_data.get("logging", {})),
    )


def _parse_repository_config(raw: Any) -> RepositoryConfig:
    if not isinstance(raw, dict):
        return RepositoryConfig()
    defaults = RepositoryConfig()
    return RepositoryConfig(
        default_branch=str(raw.get("default_branch", DEFAULT_BRANCH)).strip() or DEFAULT_BRANCH,
        tracked_files=_parse_paths(raw.get("tracked_files"), defaults.tracked_files, "tracked_files"),
        working_changes=_parse_paths(
            raw.get("working_changes"), defaults.working_changes, "working_changes"
        ),
        commits=_parse_commits(raw.get("commits"), defaults.commits),
    )


def _parse_identity_config(raw: Any) -> IdentityConfig:
    if not isinstance(raw, dict):
        return IdentityConfig()
    return IdentityConfig(
        name=str(raw.get("name", PLACEHOLDER_NAME)),
        email=str(raw.get("email", PLACEHOLDER_EMAIL)),
    )


def _parse_session_config(raw: Any) -> SessionConfig:
    if not isinstance(raw, dict):
        return SessionConfig()
    activity_limit = int(raw.get("activity_limit", DEFAULT_ACTIVITY_LIMIT))
    if activity_limit < 1:
        raise ValueError("session.activity_limit must be at least 1.")
    return SessionConfig(
        activity_limit=activity_limit,
        recent_commits=int(raw.get("recent_commits", DEFAULT_RECENT_COMMITS)),
    )


def _parse_logging_config(raw: Any) -> LoggingConfig:
    if not isinstance(raw, dict):
        return LoggingConfig()
    return LoggingConfig(level=str(raw.get("level", "INFO")))


def _parse_paths(raw: Any, default: list[str], key: str) -> list[str]:
    if raw is None:
        return default
    if not isinstance(raw, list):
        raise ValueError(f"{key} must be a list of paths.")
    return [str(item) for item in raw]


def _parse_commits(raw: Any, default: list[Commit]) -> list[Commit]:
    if raw is None:
        return default
    if not isinstance(raw, list):
        raise ValueError("commits must be a list of commit definitions.")
    commits: list[Commit] = []
    seen: set[str] = set()
    for item in raw:
        if not isinstance(item, dict):
            raise ValueError("Commit definition must be a mapping.")
        commit_id = str(item.get("id") or "").strip()
        message = str(item.get("message") or "").strip()
        if not commit_id or not message:
            raise ValueError("Commit definitions require 'id' and 'message'.")
        if commit_id in seen:
            raise ValueError(f"Duplicate commit id in configuration: {commit_id}")
        seen.add(commit_id)
        commits.append(
            Commit(
                id=commit_id,
                message=message,
                author_name=str(item.get("author_name", "Unknown")),
                author_email=str(item.get("author_email", "unknown@example.com")),
                pushed=bool(item.get("pushed", True)),
            )
        )
    return commits
