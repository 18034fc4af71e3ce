from __future__ import annotations

import pytest

from gitsim.commands.parsing import (
    AddCommand,
    CommitCommand,
    ConfigCommand,
    LogCommand,
    ParseError,
    PullCommand,
    PushCommand,
    StashListCommand,
    StashPopCommand,
    StashPushCommand,
    StatusCommand,
    SwitchCommand,
    parse_command,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("git status", StatusCommand()),
        ("  git   log  ", LogCommand()),
        ("git push", PushCommand()),
        ("git pull", PullCommand()),
        ("git add README.md", AddCommand(path="README.md")),
        ("git switch feature/cart", SwitchCommand(branch="feature/cart")),
        ('git commit -m "fix   spacing"', CommitCommand(message="fix   spacing")),
        ("git stash", StashPushCommand(message="WIP")),
        ("git stash push", StashPushCommand(message="WIP")),
        ('git stash push -m "halfway"', StashPushCommand(message="halfway")),
        ("git stash list", StashListCommand()),
        ("git stash pop", StashPopCommand()),
    ],
)
def test_parse_command_valid_lines(line: str, expected: object) -> None:
    assert parse_command(line) == expected


def test_parse_config_captures_quoted_fields() -> None:
    parsed = parse_command(
        'git config --global user.name "Ada Lovelace" user.email "ada@example.com"'
    )

    assert parsed == ConfigCommand(user_name="Ada Lovelace", user_email="ada@example.com")


def test_parse_config_email_only() -> None:
    parsed = parse_command('git config --global user.email "ada@example.com"')

    assert parsed == ConfigCommand(user_name=None, user_email="ada@example.com")


def test_add_dot_means_stage_all() -> None:
    parsed = parse_command("git add .")

    assert isinstance(parsed, AddCommand)
    assert parsed.stage_all is True


@pytest.mark.parametrize(
    ("line", "message"),
    [
        ("foo bar", "Command must start with git"),
        ("", "Command must start with git"),
        ("gitstatus", "Command must start with git"),
        ("git", "usage: git <command> [<args>]"),
        ("git rebase main", "git: 'rebase' not implemented in simulation"),
        ("git add", "fatal: pathspec required"),
        ("git commit", "error: commit message required (-m)"),
        ("git commit -m update", "error: wrap commit message in quotes"),
        ("git commit -m 'single quotes'", "error: wrap commit message in quotes"),
        ("git switch", "error: branch name required"),
        ("git config --global user.name Ada", 'usage: git config --global user.name "Your Name" (and/or user.email)'),
        ("git stash drop", "Unsupported stash subcommand in simulation"),
        ("git stash push -m wip", "error: wrap stash message in quotes"),
        ('git stash push -m"wip"', "error: wrap stash message in quotes"),
        ('git stash -m"wip"', "Unsupported stash subcommand in simulation"),
    ],
)
def test_parse_command_errors(line: str, message: str) -> None:
    parsed = parse_command(line)

    assert isinstance(parsed, ParseError)
    assert parsed.message == message
