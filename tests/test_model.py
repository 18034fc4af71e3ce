from __future__ import annotations

from itertools import count
from typing import Callable

from gitsim.model import (
    Commit,
    FileStatus,
    Identity,
    RepositoryModel,
    create_demo_repository,
)


def _sequential_ids() -> Callable[[], str]:
    counter = count(1)
    return lambda: f"{next(counter):07x}"


def test_demo_repository_seed() -> None:
    model = create_demo_repository()

    assert model.branch == "main"
    assert [c.id for c in model.local_commits] == ["a1b2c3d", "d4e5f6a", "b7c8d9e"]
    assert model.remote_commits == model.local_commits
    assert model.working_changes == ["README.md", "src/App.jsx"]
    assert model.staged == []
    assert model.identity == Identity(name="(no name)", email="(no email)")
    assert model.ahead_count() == 0


def test_set_identity_keeps_unspecified_fields() -> None:
    model = RepositoryModel()

    model.set_identity(name="Ada")
    model.set_identity(email="ada@example.com")

    assert model.identity == Identity(name="Ada", email="ada@example.com")


def test_stage_file_ignores_unknown_and_duplicate_paths() -> None:
    model = RepositoryModel(working_changes=["a.txt", "b.txt"])

    model.stage_file("a.txt")
    model.stage_file("a.txt")
    model.stage_file("missing.txt")

    assert model.staged == ["a.txt"]
    assert model.unstaged_changes() == ["b.txt"]


def test_commit_removes_exactly_the_staged_paths() -> None:
    model = RepositoryModel(
        working_changes=["a.txt", "b.txt"],
        identity=Identity(name="Ada", email="ada@example.com"),
        id_factory=_sequential_ids(),
    )
    model.stage_file("a.txt")

    commit = model.commit("first")

    assert commit == Commit("0000001", "first", "Ada", "ada@example.com", pushed=False)
    assert model.local_commits[-1] == commit
    assert model.staged == []
    assert model.working_changes == ["b.txt"]


def test_commit_regenerates_colliding_ids() -> None:
    ids = iter(["a1b2c3d", "a1b2c3d", "fffffff"])
    model = create_demo_repository(id_factory=lambda: next(ids))
    model.stage_all()

    commit = model.commit("collision")

    assert commit.id == "fffffff"


def test_push_marks_commits_and_recomputes_remote() -> None:
    model = create_demo_repository(id_factory=_sequential_ids())
    model.stage_all()
    model.commit("one")

    assert model.push() == 1
    assert all(c.pushed for c in model.local_commits)
    assert model.remote_commits == model.local_commits

    remote_before = model.remote_commits
    assert model.push() == 0
    assert model.remote_commits == remote_before


def test_pull_is_up_to_date_without_remote_drift() -> None:
    model = create_demo_repository()

    assert model.pull() is None
    assert len(model.local_commits) == 3


def test_pull_merges_remote_only_commits_once() -> None:
    shared = Commit("1111111", "shared", "Alice", "alice@example.com", pushed=True)
    remote_only = Commit("2222222", "remote", "Bob", "bob@example.com", pushed=True)
    model = RepositoryModel(commits=[shared], remote_commits=[shared, remote_only])

    assert model.pull() == 1
    assert [c.id for c in model.local_commits] == ["1111111", "2222222"]
    assert model.pull() is None


def test_switch_branch_reports_current_branch() -> None:
    model = RepositoryModel()

    assert model.switch_branch("main") is True
    assert model.switch_branch("feature") is False
    assert model.branch == "feature"


def test_switch_branch_does_not_scope_other_state() -> None:
    model = create_demo_repository()
    model.stage_file("README.md")
    before = model.snapshot()

    model.switch_branch("feature")

    after = model.snapshot()
    assert after.pop("branch") == "feature"
    before.pop("branch")
    assert after == before


def test_stash_is_last_in_first_out() -> None:
    model = RepositoryModel(working_changes=["a.txt"])
    model.stage_file("a.txt")

    model.stash_push("m1")
    assert model.working_changes == []
    assert model.staged == []

    model = _with_changes(model, ["b.txt"])
    model.stash_push("m2")

    assert [entry.message for entry in model.stash_list()] == ["m2", "m1"]
    popped = model.stash_pop()
    assert popped.message == "m2"
    assert model.working_changes == ["b.txt"]
    assert [entry.message for entry in model.stash_list()] == ["m1"]


def test_stash_pop_keeps_staged_within_working_changes() -> None:
    model = RepositoryModel(working_changes=["a.txt"])
    model.stash_push("WIP")
    model = _with_changes(model, ["b.txt"])
    model.stage_file("b.txt")

    model.stash_pop()

    assert model.working_changes == ["a.txt"]
    assert model.staged == []


def test_file_status_by_membership() -> None:
    model = create_demo_repository()
    model.stage_file("README.md")

    assert model.file_status("README.md") is FileStatus.STAGED
    assert model.file_status("src/App.jsx") is FileStatus.MODIFIED
    assert model.file_status("src/main.jsx") is FileStatus.CLEAN


def test_snapshot_is_json_compatible() -> None:
    import json

    model = create_demo_repository()
    model.stash_push("WIP")

    data = json.loads(json.dumps(model.snapshot()))

    assert data["stashes"] == [{"message": "WIP", "snapshot": ["README.md", "src/App.jsx"]}]
    assert data["local_commits"][0]["id"] == "a1b2c3d"


def _with_changes(model: RepositoryModel, paths: list[str]) -> RepositoryModel:
    # Working changes only come from seeds or stash pops, so reach in for tests.
    model._working_changes = list(paths)
    return model


def test_pull_with_diverging_counts_merges_nothing_new() -> None:
    first = Commit("1111111", "first", "Alice", "alice@example.com", pushed=True)
    second = Commit("2222222", "second", "Bob", "bob@example.com", pushed=True)
    model = RepositoryModel(commits=[first, second], remote_commits=[first])

    assert model.pull() == 0
    assert model.local_commits == [first, second]
