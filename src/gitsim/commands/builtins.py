"""Built-in handlers for the simulated git subcommands."""

from __future__ import annotations

from dataclasses import dataclass

from gitsim.commands.base import CommandHandler, CommandResult
from gitsim.commands.parsing import (
    AddCommand,
    CommitCommand,
    ConfigCommand,
    LogCommand,
    PullCommand,
    PushCommand,
    StashListCommand,
    StashPopCommand,
    StashPushCommand,
    StatusCommand,
    SwitchCommand,
)
from gitsim.commands.registry import CommandRegistry
from gitsim.model import RepositoryModel


@dataclass
class StatusHandler(CommandHandler):
    """Report branch, ahead count and staged/unstaged files."""

    @property
    def name(self) -> str:
        return StatusCommand.name

    @property
    def description(self) -> str:
        return "Show the working tree status."

    def execute(self, model: RepositoryModel, command: StatusCommand) -> CommandResult:
        staged = " ".join(model.staged) or "(none)"
        unstaged = " ".join(model.unstaged_changes()) or "(clean)"
        lines = [
            f"On branch {model.branch}",
            f"Commits ahead: {model.ahead_count()}",
            f"Changes staged: {staged}",
            f"Changes not staged: {unstaged}",
        ]
        return CommandResult(name=self.name, success=True, lines=lines)


@dataclass
class ConfigHandler(CommandHandler):
    @property
    def name(self) -> str:
        return ConfigCommand.name

    @property
    def description(self) -> str:
        return "Set user.name and/or user.email."

    def execute(self, model: RepositoryModel, command: ConfigCommand) -> CommandResult:
        model.set_identity(name=command.user_name, email=command.user_email)
        changed = []
        if command.user_name is not None:
            changed.append(f"name='{command.user_name}'")
        if command.user_email is not None:
            changed.append(f"email='{command.user_email}'")
        return CommandResult(
            name=self.name,
            success=True,
            lines=[f"Updated config: {', '.join(changed)}"],
        )


@dataclass
class AddHandler(CommandHandler):
    """Stage one working change, or all of them for ``git add .``."""

    @property
    def name(self) -> str:
        return AddCommand.name

    @property
    def description(self) -> str:
        return "Stage a modified file."

    def execute(self, model: RepositoryModel, command: AddCommand) -> CommandResult:
        if command.stage_all:
            staged = model.stage_all()
            lines = [f"staged {path}" for path in staged]
            lines.append("Added all changes")
            return CommandResult(
                name=self.name,
                success=True,
                lines=lines,
                activity="Staged all changes" if staged else None,
            )
        if command.path not in model.working_changes:
            return CommandResult.failure(
                self.name, f"warning: pathspec '{command.path}' did not match any files"
            )
        model.stage_file(command.path)
        return CommandResult(
            name=self.name,
            success=True,
            lines=[f"staged {command.path}"],
            activity=f"Staged {command.path}",
        )


@dataclass
class CommitHandler(CommandHandler):
    @property
    def name(self) -> str:
        return CommitCommand.name

    @property
    def description(self) -> str:
        return "Record staged changes as a new commit."

    def execute(self, model: RepositoryModel, command: CommitCommand) -> CommandResult:
        if not model.staged:
            return CommandResult.failure(self.name, "nothing to commit, working tree clean")
        commit = model.commit(command.message)
        return CommandResult(
            name=self.name,
            success=True,
            lines=[f"[{model.branch} {commit.id}] {commit.message}"],
            activity=f"Commit {commit.id}: {commit.message}",
        )


@dataclass
class LogHandler(CommandHandler):
    """List local commits, most recent first."""

    @property
    def name(self) -> str:
        return LogCommand.name

    @property
    def description(self) -> str:
        return "Show the local commit history."

    def execute(self, model: RepositoryModel, command: LogCommand) -> CommandResult:
        lines: list[str] = []
        for commit in reversed(model.local_commits):
            tag = "pushed" if commit.pushed else "local"
            lines.append(f"commit {commit.id} ({tag})")
            lines.append(f"Author: {commit.author_name} <{commit.author_email}>")
            lines.append(f"Message: {commit.message}")
            lines.append("")
        return CommandResult(name=self.name, success=True, lines=lines)


@dataclass
class PushHandler(CommandHandler):
    @property
    def name(self) -> str:
        return PushCommand.name

    @property
    def description(self) -> str:
        return "Publish unpushed commits to the remote."

    def execute(self, model: RepositoryModel, command: PushCommand) -> CommandResult:
        if model.ahead_count() == 0:
            return CommandResult(name=self.name, success=True, lines=["Everything up-to-date"])
        count = model.push()
        return CommandResult(
            name=self.name,
            success=True,
            lines=[f"Pushed {count} commit(s) to origin/{model.branch}"],
            activity=f"Pushed {count} commit(s)",
        )


@dataclass
class PullHandler(CommandHandler):
    """Merge remote-only commits; usually reports up to date."""

    @property
    def name(self) -> str:
        return PullCommand.name

    @property
    def description(self) -> str:
        return "Fetch and merge commits from the remote."

    def execute(self, model: RepositoryModel, command: PullCommand) -> CommandResult:
        if model.pull() is None:
            return CommandResult(name=self.name, success=True, lines=["Already up to date."])
        return CommandResult(
            name=self.name,
            success=True,
            lines=["Pulled latest changes"],
            activity="Pulled changes",
        )


@dataclass
class SwitchHandler(CommandHandler):
    """Move the branch pointer. Commits and files are not scoped by branch."""

    @property
    def name(self) -> str:
        return SwitchCommand.name

    @property
    def description(self) -> str:
        return "Switch to another branch."

    def execute(self, model: RepositoryModel, command: SwitchCommand) -> CommandResult:
        if command.branch == model.branch:
            return CommandResult(
                name=self.name, success=True, lines=[f"Already on '{model.branch}'"]
            )
        model.switch_branch(command.branch)
        return CommandResult(
            name=self.name,
            success=True,
            lines=[f"Switched to branch '{command.branch}'"],
            activity=f"Switched to {command.branch}",
        )


@dataclass
class StashPushHandler(CommandHandler):
    @property
    def name(self) -> str:
        return StashPushCommand.name

    @property
    def description(self) -> str:
        return "Shelve working directory changes."

    def execute(self, model: RepositoryModel, command: StashPushCommand) -> CommandResult:
        entry = model.stash_push(command.message)
        return CommandResult(
            name=self.name,
            success=True,
            lines=[f"Saved working directory state '{entry.message}'"],
            activity=f"Stashed changes ({entry.message})",
        )


@dataclass
class StashListHandler(CommandHandler):
    @property
    def name(self) -> str:
        return StashListCommand.name

    @property
    def description(self) -> str:
        return "List stash entries."

    def execute(self, model: RepositoryModel, command: StashListCommand) -> CommandResult:
        entries = model.stash_list()
        if not entries:
            return CommandResult(name=self.name, success=True, lines=["No stashes."])
        lines = [f"stash@{{{index}}}: {entry.message}" for index, entry in enumerate(entries)]
        return CommandResult(name=self.name, success=True, lines=lines)


@dataclass
class StashPopHandler(CommandHandler):
    @property
    def name(self) -> str:
        return StashPopCommand.name

    @property
    def description(self) -> str:
        return "Restore and drop the most recent stash entry."

    def execute(self, model: RepositoryModel, command: StashPopCommand) -> CommandResult:
        if not model.stash_list():
            return CommandResult.failure(self.name, "No stash entries.")
        entry = model.stash_pop()
        return CommandResult(
            name=self.name,
            success=True,
            lines=[f"Applied and dropped stash ({entry.message})"],
            activity=f"Popped stash ({entry.message})",
        )


def build_default_command_registry() -> CommandRegistry:
    """Create a registry pre-populated with every supported subcommand."""

    registry = CommandRegistry()
    registry.register(StatusHandler())
    registry.register(ConfigHandler())
    registry.register(AddHandler())
    registry.register(CommitHandler())
    registry.register(LogHandler())
    registry.register(PushHandler())
    registry.register(PullHandler())
    registry.register(SwitchHandler())
    registry.register(StashPushHandler())
    registry.register(StashListHandler())
    registry.register(StashPopHandler())
    return registry
