"""Shared test fixtures — sample rsync reports, job files, source trees."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_report() -> str:
    """A --dry-run --itemize-changes report with all three kinds of change."""
    return textwrap.dedent("""\
        sending incremental file list
        *deleting   old/file.txt
        >f+++++++++ new/file.txt
        >f.st...... changed/file.txt
        cd+++++++++ new/
        >f+++++++++ top.txt

        sent 1.23K bytes  received 45 bytes  2.55K bytes/sec
        total size is 9.87M  speedup is 7,766.74 (DRY RUN)
    """)


@pytest.fixture
def sample_report_empty() -> str:
    """A report with nothing to transfer."""
    return textwrap.dedent("""\
        sending incremental file list

        sent 120 bytes  received 12 bytes  264.00 bytes/sec
        total size is 4.20K  speedup is 31.82 (DRY RUN)
    """)


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    (src / "docs").mkdir(parents=True)
    (src / "docs" / "a.txt").write_text("a\n")
    (src / "b.txt").write_text("b\n")
    return src


@pytest.fixture
def target_root(tmp_path: Path) -> Path:
    root = tmp_path / "backup"
    root.mkdir()
    return root


@pytest.fixture
def jobs_file(tmp_path: Path, source_dir: Path) -> Path:
    """A TOML job list with one delete-mode job."""
    path = tmp_path / "jobs.toml"
    path.write_text(
        "[[jobs]]\n"
        f'source = "{source_dir}"\n'
        'target = "/mirror"\n'
        'mode = "delete"\n'
    )
    return path
