"""Job runner — dry-run pass that builds change trees, and the real pass."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from batchsync.config.schema import Job
from batchsync.diff.models import JobResult
from batchsync.diff.parser import parse_report
from batchsync.rsync import adapter

Notify = Callable[[str], None]


def _quiet(msg: str) -> None:
    pass


def preview(jobs: Sequence[Job], *, rsync: str = "rsync", notify: Optional[Notify] = None) -> List[JobResult]:
    """Dry-run every job in order and return one JobResult per job.

    Add-mode jobs never report deletions.
    """
    notify = notify or _quiet
    results: List[JobResult] = []
    for job in jobs:
        notify(" ".join(adapter.build_args(job, dry_run=True, rsync=rsync)))
        report = adapter.dry_run(job, rsync=rsync)
        result = JobResult(job=job, diff=parse_report(report, include_deletions=job.delete))
        notify(f"{job.source}: {result.diff.count_leaves()} change(s)")
        results.append(result)
    return results


def apply(jobs: Sequence[Job], *, rsync: str = "rsync", notify: Optional[Notify] = None) -> None:
    """Run the real sync for every job, one after another."""
    notify = notify or _quiet
    for job in jobs:
        notify(" ".join(adapter.build_args(job, dry_run=False, rsync=rsync)))
        status = adapter.sync(job, rsync=rsync)
        notify(f"{job.source}: rsync exited with {status}")
