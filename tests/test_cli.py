"""Tests for the command-line interface."""

import json
import shutil
from pathlib import Path

import pytest
from typer.testing import CliRunner

from conftest import FIXTURES_PATH
from depcheck_lite import __version__
from depcheck_lite.cli import app
from depcheck_lite.paths import CONFIG_FILE

cli = CliRunner()


@pytest.fixture
def simple_project(tmp_path: Path) -> Path:
    """A writable copy of the simple fixture project."""
    project = tmp_path / "simple"
    shutil.copytree(FIXTURES_PATH / "simple", project)
    return project


class TestOutput:
    """Tests for human and JSON output."""

    def test_reports_unused_and_fails(self):
        result = cli.invoke(app, [str(FIXTURES_PATH / "simple")])

        assert result.exit_code == 1
        assert "Found 3 unused dependencies:" in result.output
        assert "- lodash" in result.output
        assert "Total: 3/4" in result.output

    def test_success_when_nothing_unused(self):
        result = cli.invoke(app, [str(FIXTURES_PATH / "subpath")])

        assert result.exit_code == 0
        assert "No unused dependencies found!" in result.output

    def test_json_output(self):
        result = cli.invoke(app, [str(FIXTURES_PATH / "simple"), "--json"])

        assert result.exit_code == 1
        assert json.loads(result.stdout) == {
            "unused": ["jest", "lodash", "typescript"],
            "used": ["express"],
            "total": 4,
        }

    def test_output_file(self, tmp_path: Path):
        output = tmp_path / "out.json"

        result = cli.invoke(app, [str(FIXTURES_PATH / "simple"), "--output", str(output)])

        assert result.exit_code == 1
        assert json.loads(output.read_text())["used"] == ["express"]

    def test_verbose_shows_summary(self):
        result = cli.invoke(app, [str(FIXTURES_PATH / "simple"), "--verbose"])

        assert "Files scanned" in result.output

    def test_json_verbose_with_config_keeps_stdout_json(self, simple_project: Path):
        (simple_project / CONFIG_FILE).write_text(json.dumps({"ignore": ["jest"]}))

        result = cli.invoke(app, [str(simple_project), "--json", "--verbose"])

        assert result.exit_code == 1
        assert json.loads(result.stdout) == {
            "unused": ["lodash", "typescript"],
            "used": ["express"],
            "total": 3,
        }
        assert "Using config" in result.stderr

    def test_version(self):
        result = cli.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestOptions:
    """Tests for ignore, dirs and exclude options."""

    def test_repeatable_ignore(self):
        result = cli.invoke(
            app,
            [str(FIXTURES_PATH / "simple"), "--json", "--ignore", "lodash", "-i", "jest"],
        )

        data = json.loads(result.stdout)
        assert data["unused"] == ["typescript"]
        assert data["total"] == 2

    def test_dirs_override(self):
        result = cli.invoke(app, [str(FIXTURES_PATH / "mixed"), "--json", "--dirs", "pages,components"])

        data = json.loads(result.stdout)
        assert data["used"] == ["@emotion/styled", "react", "react-dom"]

    def test_dirs_whitespace_and_empty_entries_ignored(self):
        result = cli.invoke(
            app, [str(FIXTURES_PATH / "mixed"), "--json", "--dirs", " pages , components ,"]
        )

        data = json.loads(result.stdout)
        assert data["used"] == ["@emotion/styled", "react", "react-dom"]

    def test_exclude(self):
        result = cli.invoke(app, [str(FIXTURES_PATH / "mixed"), "--json", "-e", "__tests__/"])

        assert "vitest" in json.loads(result.stdout)["unused"]

    def test_config_file_merged_with_options(self, simple_project: Path):
        (simple_project / CONFIG_FILE).write_text(json.dumps({"ignore": ["typescript"]}))

        result = cli.invoke(app, [str(simple_project), "--json", "--ignore", "jest"])

        data = json.loads(result.stdout)
        assert data["unused"] == ["lodash"]
        assert data["total"] == 2

    def test_all_ignored_succeeds(self, simple_project: Path):
        (simple_project / CONFIG_FILE).write_text(
            json.dumps({"ignore": ["jest", "lodash", "typescript"]})
        )

        result = cli.invoke(app, [str(simple_project)])

        assert result.exit_code == 0


class TestErrors:
    """Tests for error reporting."""

    def test_missing_manifest(self, tmp_path: Path):
        result = cli.invoke(app, [str(tmp_path)])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "package.json not found" in result.output

    def test_invalid_config(self, simple_project: Path):
        (simple_project / CONFIG_FILE).write_text("{")

        result = cli.invoke(app, [str(simple_project)])

        assert result.exit_code == 1
        assert "Invalid config file" in result.output

    def test_unknown_package_manager(self):
        result = cli.invoke(app, [str(FIXTURES_PATH / "simple"), "-p", "bun"])

        assert result.exit_code == 1
        assert "--package-manager must be one of" in result.output


class TestInteractive:
    """Tests for --interactive."""

    def test_cancel_keeps_failure_exit(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "depcheck_lite.removal.runner.SubprocessRunner.run",
            lambda self, args, cwd: calls.append(args) or 0,
        )

        result = cli.invoke(app, [str(FIXTURES_PATH / "simple"), "--interactive"], input="\n")

        assert result.exit_code == 1
        assert calls == []
        assert "Cancelled" in result.output

    def test_json_mode_prompts_on_stderr(self, monkeypatch):
        monkeypatch.setattr(
            "depcheck_lite.removal.runner.SubprocessRunner.run",
            lambda self, args, cwd: 0,
        )

        result = cli.invoke(
            app, [str(FIXTURES_PATH / "simple"), "--json", "--interactive"], input="\n"
        )

        assert result.exit_code == 1
        assert json.loads(result.stdout)["used"] == ["express"]
        assert "Cancelled" in result.stderr

    def test_yes_confirms_removal(self, simple_project: Path, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "depcheck_lite.removal.runner.SubprocessRunner.run",
            lambda self, args, cwd: calls.append(args) or 0,
        )

        result = cli.invoke(
            app, [str(simple_project), "--interactive", "-p", "npm"], input="1\nyes\n"
        )

        assert result.exit_code == 1
        assert calls == [["npm", "uninstall", "--save", "jest"]]

    def test_removing_everything_succeeds(self, simple_project: Path, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "depcheck_lite.removal.runner.SubprocessRunner.run",
            lambda self, args, cwd: calls.append((args, cwd)) or 0,
        )
        (simple_project / "yarn.lock").write_text("")

        result = cli.invoke(app, [str(simple_project), "--interactive"], input="all\ny\n")

        assert result.exit_code == 0
        assert calls == [(["yarn", "remove", "jest", "lodash", "typescript"], simple_project.resolve())]

    def test_partial_removal_still_fails(self, simple_project: Path, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "depcheck_lite.removal.runner.SubprocessRunner.run",
            lambda self, args, cwd: calls.append(args) or 0,
        )

        result = cli.invoke(
            app,
            [str(simple_project), "--interactive", "-p", "pnpm"],
            input="2\ny\n",
        )

        assert result.exit_code == 1
        assert calls == [["pnpm", "remove", "lodash"]]
