"""Read model for rendering the simulated workspace."""

from __future__ import annotations

from dataclasses import dataclass

from gitsim.model import FileStatus, Identity, RepositoryModel

DEFAULT_RECENT_COMMITS = 6


@dataclass(frozen=True)
class FileEntry:
    path: str
    status: FileStatus


@dataclass(frozen=True)
class CommitEntry:
    """A commit as listed in the explorer, tagged ``pushed`` or ``local``."""

    id: str
    message: str
    tag: str


@dataclass(frozen=True)
class StashView:
    index: int
    message: str


@dataclass(frozen=True)
class WorkspaceView:
    """Snapshot of everything the explorer panel displays.

    Attributes:
        branch: Current branch name.
        ahead: Number of unpushed commits.
        files: Tracked files with their status tag.
        recent_commits: Most recent commits, newest first.
        stashes: Stash entries, newest first.
        identity: Configured author identity.
        staged: Staged paths.
        unstaged: Modified paths that are not staged.
    """

    branch: str
    ahead: int
    files: list[FileEntry]
    recent_commits: list[CommitEntry]
    stashes: list[StashView]
    identity: Identity
    staged: list[str]
    unstaged: list[str]

    def summary_text(self) -> str:
        """Render the workspace readme shown next to the simulator."""

        working = ", ".join(self.unstaged) or "none"
        staged = ", ".join(self.staged) or "none"
        return "\n".join(
            [
                "# Git Simulator Workspace",
                "",
                f"Branch: {self.branch}",
                f"Ahead (unpushed commits): {self.ahead}",
                f"Working changes: {working}",
                f"Staged: {staged}",
                "",
                "Use the interactive buttons / commands to modify state. "
                "This panel mirrors the simulator.",
            ]
        )


def build_workspace_view(
    model: RepositoryModel,
    recent_commits: int = DEFAULT_RECENT_COMMITS,
) -> WorkspaceView:
    """Derive the explorer read model from the repository state.

    Working changes outside the tracked pool are listed after the pool so
    that every modified path is visible.
    """

    paths = model.tracked_files
    paths.extend(p for p in model.working_changes if p not in paths)
    commits = list(reversed(model.local_commits))[: max(recent_commits, 0)]
    return WorkspaceView(
        branch=model.branch,
        ahead=model.ahead_count(),
        files=[FileEntry(path=path, status=model.file_status(path)) for path in paths],
        recent_commits=[
            CommitEntry(id=c.id, message=c.message, tag="pushed" if c.pushed else "local")
            for c in commits
        ],
        stashes=[
            StashView(index=index, message=entry.message)
            for index, entry in enumerate(model.stash_list())
        ],
        identity=model.identity,
        staged=model.staged,
        unstaged=model.unstaged_changes(),
    )
