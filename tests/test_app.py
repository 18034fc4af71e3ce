from __future__ import annotations

from pathlib import Path

import pytest

from gitsim.app import AppConfigError, create_session, read_script, run_commands


def test_run_commands_returns_session(tmp_path: Path) -> None:
    session = run_commands(["git add .", 'git commit -m "all"', "git push"], tmp_path)

    assert session.model.ahead_count() == 0
    assert session.scrollback()[-1].startswith("Pushed 1 commit(s)")


def test_read_script_skips_comments_and_blanks(tmp_path: Path) -> None:
    script = tmp_path / "lesson.txt"
    script.write_text("# intro\n\n  git status  \ngit log\n", encoding="utf-8")

    assert read_script(script) == ["git status", "git log"]


def test_create_session_wraps_config_errors(tmp_path: Path) -> None:
    (tmp_path / "gitsim.yaml").write_text('{"session": {"activity_limit": -1}}', encoding="utf-8")

    with pytest.raises(AppConfigError):
        create_session(tmp_path)
