"""In-memory model of a simulated repository."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Iterable

DEFAULT_BRANCH = "main"
PLACEHOLDER_NAME = "(no name)"
PLACEHOLDER_EMAIL = "(no email)"
COMMIT_ID_LENGTH = 7


class FileStatus(str, Enum):
    """Status tag of a tracked file in the explorer view."""

    STAGED = "staged"
    MODIFIED = "modified"
    CLEAN = "clean"


@dataclass(frozen=True)
class Identity:
    """Author identity used for new commits."""

    name: str = PLACEHOLDER_NAME
    email: str = PLACEHOLDER_EMAIL


@dataclass(frozen=True)
class Commit:
    """A commit in the simulated history.

    Attributes:
        id: Short hexadecimal identifier, unique within the model.
        message: Commit message.
        author_name: Name of the identity at commit time.
        author_email: Email of the identity at commit time.
        pushed: Whether the commit has been pushed to the remote.
    """

    id: str
    message: str
    author_name: str
    author_email: str
    pushed: bool = False


@dataclass(frozen=True)
class StashEntry:
    """A shelved set of working directory changes."""

    message: str
    snapshot: tuple[str, ...]


def random_commit_id() -> str:
    """Return a random seven character hexadecimal commit id."""

    return uuid.uuid4().hex[:COMMIT_ID_LENGTH]


class RepositoryModel:
    """Holds simulated repository state and applies mutations.

    No method validates its preconditions or raises for them; the command
    handlers check state before calling a mutation.
    """

    def __init__(
        self,
        *,
        branch: str = DEFAULT_BRANCH,
        identity: Identity | None = None,
        commits: Iterable[Commit] = (),
        remote_commits: Iterable[Commit] | None = None,
        working_changes: Iterable[str] = (),
        tracked_files: Iterable[str] = (),
        id_factory: Callable[[], str] = random_commit_id,
    ) -> None:
        """Initialize the model.

        Args:
            branch: Name of the current branch.
            identity: Identity used for new commits.
            commits: Initial local history, oldest first.
            remote_commits: Initial remote history. Defaults to the pushed
                local commits.
            working_changes: Paths with uncommitted edits.
            tracked_files: Paths shown by the explorer view.
            id_factory: Callable producing new commit ids.
        """

        self._branch = branch
        self._identity = identity or Identity()
        self._local_commits: list[Commit] = list(commits)
        if remote_commits is None:
            self._remote_commits = [c for c in self._local_commits if c.pushed]
        else:
            self._remote_commits = list(remote_commits)
        self._working_changes: list[str] = _unique(working_changes)
        self._staged: list[str] = []
        self._stashes: list[StashEntry] = []
        self._tracked_files: list[str] = _unique(tracked_files)
        self._id_factory = id_factory

    @property
    def branch(self) -> str:
        return self._branch

    @property
    def identity(self) -> Identity:
        return self._identity

    @property
    def local_commits(self) -> list[Commit]:
        return list(self._local_commits)

    @property
    def remote_commits(self) -> list[Commit]:
        return list(self._remote_commits)

    @property
    def working_changes(self) -> list[str]:
        return list(self._working_changes)

    @property
    def staged(self) -> list[str]:
        return list(self._staged)

    @property
    def tracked_files(self) -> list[str]:
        return list(self._tracked_files)

    def set_identity(self, name: str | None = None, email: str | None = None) -> Identity:
        """Overwrite the provided identity fields and keep the others."""

        self._identity = Identity(
            name=name if name is not None else self._identity.name,
            email=email if email is not None else self._identity.email,
        )
        return self._identity

    def stage_file(self, path: str) -> None:
        """Stage a path that is currently a working change."""

        if path in self._working_changes and path not in self._staged:
            self._staged.append(path)

    def stage_all(self) -> list[str]:
        """Stage every working change and return the staged paths."""

        self._staged = list(self._working_changes)
        return list(self._staged)

    def commit(self, message: str) -> Commit:
        """Record the staged paths as a new local commit.

        Args:
            message: Commit message.

        Returns:
            The newly created, unpushed commit.
        """

        commit = Commit(
            id=self._next_commit_id(),
            message=message,
            author_name=self._identity.name,
            author_email=self._identity.email,
            pushed=False,
        )
        self._local_commits.append(commit)
        committed = set(self._staged)
        self._working_changes = [p for p in self._working_changes if p not in committed]
        self._staged = []
        return commit

    def push(self) -> int:
        """Mark all unpushed commits as pushed.

        Returns:
            Number of commits newly pushed; zero when there was nothing to push.
        """

        count = self.ahead_count()
        self._local_commits = [
            commit if commit.pushed else replace(commit, pushed=True)
            for commit in self._local_commits
        ]
        self._remote_commits = [c for c in self._local_commits if c.pushed]
        return count

    def pull(self) -> int | None:
        """Merge remote-only commits into the local history.

        The remote counts as up to date when it holds exactly as many commits
        as the pushed part of the local history.

        Returns:
            None when already up to date, otherwise the number of commits
            merged, which may be zero.
        """

        pushed_local = sum(1 for commit in self._local_commits if commit.pushed)
        if len(self._remote_commits) == pushed_local:
            return None
        known = {commit.id for commit in self._local_commits}
        merged = 0
        for commit in self._remote_commits:
            if commit.id not in known:
                self._local_commits.append(commit)
                known.add(commit.id)
                merged += 1
        return merged

    def switch_branch(self, name: str) -> bool:
        """Point the current branch at ``name``.

        Returns:
            True if the model was already on that branch.
        """

        already_on = name == self._branch
        self._branch = name
        return already_on

    def stash_push(self, message: str) -> StashEntry:
        """Shelve all working changes, staged or not, under ``message``."""

        entry = StashEntry(message=message, snapshot=tuple(self._working_changes))
        self._stashes.insert(0, entry)
        self._working_changes = []
        self._staged = []
        return entry

    def stash_pop(self) -> StashEntry:
        """Restore the most recent stash entry and drop it from the stack."""

        entry = self._stashes.pop(0)
        self._working_changes = list(entry.snapshot)
        # staged stays a subset of the restored working changes
        self._staged = [p for p in self._staged if p in self._working_changes]
        return entry

    def stash_list(self) -> list[StashEntry]:
        """Return stash entries, most recent first."""

        return list(self._stashes)

    def ahead_count(self) -> int:
        """Return the number of local commits not yet pushed."""

        return sum(1 for commit in self._local_commits if not commit.pushed)

    def unstaged_changes(self) -> list[str]:
        """Return working changes that are not staged."""

        return [p for p in self._working_changes if p not in self._staged]

    def file_status(self, path: str) -> FileStatus:
        """Return the status tag for ``path``."""

        if path in self._staged:
            return FileStatus.STAGED
        if path in self._working_changes:
            return FileStatus.MODIFIED
        return FileStatus.CLEAN

    def snapshot(self) -> dict[str, Any]:
        """Serialize the full model state into a JSON-compatible dictionary."""

        return {
            "branch": self._branch,
            "identity": {"name": self._identity.name, "email": self._identity.email},
            "local_commits": [_commit_to_dict(c) for c in self._local_commits],
            "remote_commits": [_commit_to_dict(c) for c in self._remote_commits],
            "working_changes": list(self._working_changes),
            "staged": list(self._staged),
            "stashes": [
                {"message": s.message, "snapshot": list(s.snapshot)} for s in self._stashes
            ],
            "tracked_files": list(self._tracked_files),
        }

    def _next_commit_id(self) -> str:
        known = {commit.id for commit in self._local_commits}
        known.update(commit.id for commit in self._remote_commits)
        commit_id = self._id_factory()
        while commit_id in known:
            commit_id = self._id_factory()
        return commit_id


DEMO_TRACKED_FILES: tuple[str, ...] = (
    "README.md",
    "src/App.jsx",
    "src/main.jsx",
    "src/styles.css",
    "src/versions/AllInOne.jsx",
    "src/GitGuide.jsx",
)
DEMO_WORKING_CHANGES: tuple[str, ...] = ("README.md", "src/App.jsx")
DEMO_COMMITS: tuple[Commit, ...] = (
    Commit("a1b2c3d", "init project", "Alice", "alice@example.com", pushed=True),
    Commit("d4e5f6a", "setup routing", "Bob", "bob@example.com", pushed=True),
    Commit("b7c8d9e", "add dashboard", "Carlos", "carlos@example.com", pushed=True),
)


def create_demo_repository(
    id_factory: Callable[[], str] = random_commit_id,
) -> RepositoryModel:
    """Return a model seeded with the demo history and working changes."""

    return RepositoryModel(
        branch=DEFAULT_BRANCH,
        commits=DEMO_COMMITS,
        working_changes=DEMO_WORKING_CHANGES,
        tracked_files=DEMO_TRACKED_FILES,
        id_factory=id_factory,
    )


def _commit_to_dict(commit: Commit) -> dict[str, Any]:
    return {
        "id": commit.id,
        "message": commit.message,
        "author_name": commit.author_name,
        "author_email": commit.author_email,
        "pushed": commit.pushed,
    }


def _unique(paths: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(paths))
