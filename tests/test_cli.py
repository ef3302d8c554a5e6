"""Tests for the CLI flow."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from batchsync.cli import app
from batchsync.output import pager
from batchsync.rsync import adapter

runner = CliRunner()


@pytest.fixture
def fake_tools(monkeypatch, sample_report):
    """Replace rsync and the pager; record what gets called."""
    calls = {"dry_run": [], "sync": [], "pager": [], "report": ""}

    def dry_run(job, rsync="rsync"):
        calls["dry_run"].append(job)
        return calls.get("output", sample_report)

    def sync(job, rsync="rsync"):
        calls["sync"].append(job)
        return 0

    def run_pager(cmd, path):
        calls["pager"].append(cmd)
        calls["report"] = Path(path).read_text(encoding="utf-8")
        return 0

    monkeypatch.setattr(adapter, "dry_run", dry_run)
    monkeypatch.setattr(adapter, "sync", sync)
    monkeypatch.setattr(pager, "run_pager", run_pager)
    return calls


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "batchsync" in result.output


class TestArguments:
    def test_no_arguments(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "exactly two arguments" in result.output

    def test_three_arguments(self, jobs_file: Path, target_root: Path):
        result = runner.invoke(app, [str(jobs_file), str(target_root), "extra"])
        assert result.exit_code == 1

    def test_invalid_config(self, tmp_path: Path, target_root: Path, fake_tools):
        result = runner.invoke(app, [str(tmp_path / "missing.toml"), str(target_root)])
        assert result.exit_code == 1
        assert "does not exist" in result.output
        assert fake_tools["dry_run"] == []


class TestFlow:
    def test_up_to_date(self, jobs_file, target_root, fake_tools, sample_report_empty):
        fake_tools["output"] = sample_report_empty
        result = runner.invoke(app, [str(jobs_file), str(target_root)])
        assert result.exit_code == 0
        assert "everything up to date" in result.output
        assert "everything up to date" in result.stdout
        assert fake_tools["pager"] == []
        assert "[yes/no]" not in result.output

    def test_confirmed(self, jobs_file, target_root, fake_tools):
        result = runner.invoke(app, [str(jobs_file), str(target_root)], input="yes\n")
        assert result.exit_code == 0
        assert fake_tools["pager"] == ["less"]
        assert "Diff for" in fake_tools["report"]
        assert "Syncing? [yes/no]: " in result.output
        assert len(fake_tools["sync"]) == 1
        assert fake_tools["sync"][0].target == f"{target_root}/mirror/"

    def test_declined(self, jobs_file, target_root, fake_tools):
        result = runner.invoke(app, [str(jobs_file), str(target_root)], input="no\n")
        assert result.exit_code == 0
        assert fake_tools["sync"] == []

    def test_retries_exhausted(self, jobs_file, target_root, fake_tools):
        result = runner.invoke(
            app, [str(jobs_file), str(target_root), "--max-tries", "2"], input="y\nYES\nyes\n",
        )
        assert result.exit_code == 0
        assert result.output.count("[yes/no]") == 2
        assert fake_tools["sync"] == []

    def test_pager_option(self, jobs_file, target_root, fake_tools):
        runner.invoke(app, [str(jobs_file), str(target_root), "--pager", "most"], input="no\n")
        assert fake_tools["pager"] == ["most"]

    def test_verbose(self, jobs_file, target_root, fake_tools):
        result = runner.invoke(app, [str(jobs_file), str(target_root), "-v"], input="no\n")
        assert "Jobs loaded: 1" in result.output
        assert "change(s)" in result.output

    def test_tree_conflict_is_an_error(self, jobs_file, target_root, fake_tools):
        fake_tools["output"] = "header\n>f+++++++++ a\n>f+++++++++ a/b\n"
        result = runner.invoke(app, [str(jobs_file), str(target_root)])
        assert result.exit_code == 1
        assert fake_tools["pager"] == []

    def test_bad_option_type_stops_before_dry_run(self, jobs_file, target_root, fake_tools):
        jobs_file.write_text(jobs_file.read_text() + '[options]\nmax_tries = "3"\n')
        result = runner.invoke(app, [str(jobs_file), str(target_root)], input="yes\n")
        assert result.exit_code == 1
        assert "max_tries" in result.output
        assert fake_tools["dry_run"] == []
        assert fake_tools["pager"] == []
