"""rsync subprocess wrapper — dry-run report and real sync."""

from __future__ import annotations

import subprocess
from typing import List

from batchsync.config.schema import Job


class RsyncError(Exception):
    """Raised when rsync cannot be started."""


def build_args(job: Job, *, dry_run: bool, rsync: str = "rsync") -> List[str]:
    """Return the argv for syncing *job*."""
    args = [
        rsync,
        "--verbose",
        "--recursive",
        "--human-readable",
        # only compare modification times, not permissions or owners
        "--times",
        "--itemize-changes",
    ]
    if dry_run:
        args.append("--dry-run")
    if job.delete:
        args.append("--delete")
    args.extend([job.source, job.target])
    return args


def dry_run(job: Job, rsync: str = "rsync") -> str:
    """Run rsync in dry-run mode and return its stdout.

    stderr goes straight to the terminal; the exit status is not checked.
    """
    try:
        result = subprocess.run(
            build_args(job, dry_run=True, rsync=rsync),
            stdout=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise RsyncError(f"{rsync} is not installed or not on PATH")
    return result.stdout


def sync(job: Job, rsync: str = "rsync") -> int:
    """Run the real sync with output streamed to the terminal."""
    try:
        return subprocess.run(build_args(job, dry_run=False, rsync=rsync)).returncode
    except FileNotFoundError:
        raise RsyncError(f"{rsync} is not installed or not on PATH")
