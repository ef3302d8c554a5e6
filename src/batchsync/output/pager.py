"""Temporary report file and external pager."""

from __future__ import annotations

import os
import subprocess
import tempfile
from typing import Iterable

from batchsync.diff.models import JobResult
from batchsync.output.report import write_report


class PagerError(Exception):
    """Raised when the pager cannot be started."""


def run_pager(pager: str, path: str) -> int:
    """Show *path* in *pager* and block until it exits.

    ``-R`` keeps the embedded colour escapes.
    """
    try:
        return subprocess.run([pager, "-R", path]).returncode
    except FileNotFoundError:
        raise PagerError(f"pager '{pager}' is not installed or not on PATH")


def show_report(results: Iterable[JobResult], pager: str) -> None:
    """Write the report to a temp file, page it, then delete the file."""
    fd, path = tempfile.mkstemp(prefix="batchsync-", suffix=".diff")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            write_report(results, f)
        run_pager(pager, path)
    finally:
        os.unlink(path)
