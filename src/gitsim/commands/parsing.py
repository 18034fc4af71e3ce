"""Parse command lines into typed commands."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, ClassVar, Union

DEFAULT_STASH_MESSAGE = "WIP"

_NAME_PATTERN = re.compile(r'user\.name\s+"([^"]+)"')
_EMAIL_PATTERN = re.compile(r'user\.email\s+"([^"]+)"')
_MESSAGE_PATTERN = re.compile(r'-m\s+"([^"]+)"')


@dataclass(frozen=True)
class ParseError:
    """A command line that could not be turned into a command.

    Attributes:
        message: The single output line describing the problem.
        name: Subcommand the error belongs to, when known.
    """

    message: str
    name: str | None = None


@dataclass(frozen=True)
class StatusCommand:
    name: ClassVar[str] = "status"


@dataclass(frozen=True)
class ConfigCommand:
    """Set one or both identity fields."""

    name: ClassVar[str] = "config"

    user_name: str | None = None
    user_email: str | None = None


@dataclass(frozen=True)
class AddCommand:
    """Stage a path, or every working change when ``path`` is ``.``."""

    name: ClassVar[str] = "add"

    path: str

    @property
    def stage_all(self) -> bool:
        return self.path == "."


@dataclass(frozen=True)
class CommitCommand:
    name: ClassVar[str] = "commit"

    message: str


@dataclass(frozen=True)
class LogCommand:
    name: ClassVar[str] = "log"


@dataclass(frozen=True)
class PushCommand:
    name: ClassVar[str] = "push"


@dataclass(frozen=True)
class PullCommand:
    name: ClassVar[str] = "pull"


@dataclass(frozen=True)
class SwitchCommand:
    name: ClassVar[str] = "switch"

    branch: str


@dataclass(frozen=True)
class StashPushCommand:
    name: ClassVar[str] = "stash push"

    message: str = DEFAULT_STASH_MESSAGE


@dataclass(frozen=True)
class StashListCommand:
    name: ClassVar[str] = "stash list"


@dataclass(frozen=True)
class StashPopCommand:
    name: ClassVar[str] = "stash pop"


Command = Union[
    StatusCommand,
    ConfigCommand,
    AddCommand,
    CommitCommand,
    LogCommand,
    PushCommand,
    PullCommand,
    SwitchCommand,
    StashPushCommand,
    StashListCommand,
    StashPopCommand,
]


def parse_command(line: str) -> Command | ParseError:
    """Parse a single ``git ...`` command line.

    Tokens are split on whitespace; quoted arguments are read from the raw
    line with regular expressions, so only double quotes without escapes are
    recognized.

    Args:
        line: Raw input line.

    Returns:
        The typed command, or a ParseError carrying the output line for a
        usage error or unsupported input.
    """

    line = line.strip()
    tokens = line.split()
    if not tokens or tokens[0] != "git":
        return ParseError("Command must start with git")
    if len(tokens) < 2:
        return ParseError("usage: git <command> [<args>]")
    subcommand = tokens[1]
    parser = _PARSERS.get(subcommand)
    if parser is None:
        return ParseError(f"git: '{subcommand}' not implemented in simulation", subcommand)
    return parser(line, tokens[2:])


def _parse_status(line: str, args: list[str]) -> Command | ParseError:
    return StatusCommand()


def _parse_config(line: str, args: list[str]) -> Command | ParseError:
    name_match = _NAME_PATTERN.search(line)
    email_match = _EMAIL_PATTERN.search(line)
    if not name_match and not email_match:
        return ParseError(
            'usage: git config --global user.name "Your Name" (and/or user.email)',
            ConfigCommand.name,
        )
    return ConfigCommand(
        user_name=name_match.group(1) if name_match else None,
        user_email=email_match.group(1) if email_match else None,
    )


def _parse_add(line: str, args: list[str]) -> Command | ParseError:
    if not args:
        return ParseError("fatal: pathspec required", AddCommand.name)
    return AddCommand(path=args[0])


def _parse_commit(line: str, args: list[str]) -> Command | ParseError:
    if not any(token.startswith("-m") for token in args):
        return ParseError("error: commit message required (-m)", CommitCommand.name)
    match = _MESSAGE_PATTERN.search(line)
    if not match:
        return ParseError("error: wrap commit message in quotes", CommitCommand.name)
    return CommitCommand(message=match.group(1))


def _parse_log(line: str, args: list[str]) -> Command | ParseError:
    return LogCommand()


def _parse_push(line: str, args: list[str]) -> Command | ParseError:
    return PushCommand()


def _parse_pull(line: str, args: list[str]) -> Command | ParseError:
    return PullCommand()


def _parse_switch(line: str, args: list[str]) -> Command | ParseError:
    if not args:
        return ParseError("error: branch name required", SwitchCommand.name)
    return SwitchCommand(branch=args[0])


def _parse_stash(line: str, args: list[str]) -> Command | ParseError:
    action = args[0] if args else None
    if action is None or action == "push":
        if not any(token.startswith("-m") for token in args):
            return StashPushCommand()
        match = _MESSAGE_PATTERN.search(line)
        if not match:
            return ParseError("error: wrap stash message in quotes", StashPushCommand.name)
        return StashPushCommand(message=match.group(1))
    if action == "list":
        return StashListCommand()
    if action == "pop":
        return StashPopCommand()
    return ParseError("Unsupported stash subcommand in simulation", "stash")


_PARSERS: dict[str, Callable[[str, list[str]], Command | ParseError]] = {
    "status": _parse_status,
    "config": _parse_config,
    "add": _parse_add,
    "commit": _parse_commit,
    "log": _parse_log,
    "push": _parse_push,
    "pull": _parse_pull,
    "switch": _parse_switch,
    "stash": _parse_stash,
}
