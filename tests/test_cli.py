from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from gitsim.cli.main import app


def test_cli_init_creates_config_file(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["init", str(tmp_path)])

    assert result.exit_code == 0
    config_path = tmp_path / "gitsim.yaml"
    assert config_path.exists()
    data = json.loads(config_path.read_text(encoding="utf-8"))
    assert data["repository"]["default_branch"] == "main"


def test_cli_init_refuses_to_overwrite(tmp_path: Path) -> None:
    runner = CliRunner()
    runner.invoke(app, ["init", str(tmp_path)])

    result = runner.invoke(app, ["init", str(tmp_path)])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_cli_run_prints_scrollback(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        [
            "run",
            "git add README.md",
            'git commit -m "update readme"',
            "git push",
            "--workspace",
            str(tmp_path),
        ],
    )

    assert result.exit_code == 0
    assert "$ git add README.md" in result.output
    assert "staged README.md" in result.output
    assert "Pushed 1 commit(s) to origin/main" in result.output


def test_cli_run_reads_script_and_shows_view(tmp_path: Path) -> None:
    script = tmp_path / "lesson.txt"
    script.write_text("# stage everything\ngit add .\n\ngit status\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        app, ["run", "--script", str(script), "--workspace", str(tmp_path), "--view"]
    )

    assert result.exit_code == 0
    assert "Added all changes" in result.output
    assert "Changes staged: README.md src/App.jsx" in result.output
    assert "# Git Simulator Workspace" in result.output
    assert "stage everything" not in result.output


def test_cli_run_missing_script_fails(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app, ["run", "--script", str(tmp_path / "missing.txt"), "-w", str(tmp_path)]
    )

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_cli_run_uses_workspace_config(tmp_path: Path) -> None:
    (tmp_path / "gitsim.yaml").write_text(
        '{"repository": {"default_branch": "trunk"}}', encoding="utf-8"
    )
    runner = CliRunner()

    result = runner.invoke(app, ["run", "git status", "-w", str(tmp_path)])

    assert result.exit_code == 0
    assert "On branch trunk" in result.output


def test_cli_shell_runs_until_exit(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["shell", "-w", str(tmp_path)],
        input="git switch feature\n\ngit status\nexit\ngit push\n",
    )

    assert result.exit_code == 0
    assert "Switched to branch 'feature'" in result.output
    assert "On branch feature" in result.output
    assert "Everything up-to-date" not in result.output


def test_cli_shell_stops_at_end_of_input(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["shell", "-w", str(tmp_path)], input="git stash list\n")

    assert result.exit_code == 0
    assert "No stashes." in result.output


def test_cli_view_lists_file_statuses(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["view", "-w", str(tmp_path)])

    assert result.exit_code == 0
    assert "modified README.md" in result.output
    assert "clean    src/main.jsx" in result.output


def test_cli_commands_lists_descriptions() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["commands"])

    assert result.exit_code == 0
    assert "git status       Show the working tree status." in result.output
    assert "git stash pop    Restore and drop the most recent stash entry." in result.output
    assert len(result.output.strip().splitlines()) == 11
