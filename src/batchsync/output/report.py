"""Render change trees into the colourised report shown in the pager."""

from __future__ import annotations

from typing import IO, Iterable, List

from batchsync.diff.models import ChangeKind, Directory, JobResult
from batchsync.output.escape import fmt, fmt_add, fmt_delete, fmt_dir, fmt_modified

_LEAF_STYLE = {
    ChangeKind.DELETED: fmt_delete,
    ChangeKind.MODIFIED: fmt_modified,
    ChangeKind.ADDED: fmt_add,
}


def render(node: Directory, depth: int = 0) -> List[str]:
    """Return one formatted line per entry of *node*, children sorted by name."""
    prefix = fmt_dir("  " * depth + "> ", depth - 1) if depth > 0 else ""
    lines: List[str] = []
    for name, child in node.sorted_items():
        if isinstance(child, Directory):
            lines.append(prefix + fmt_dir(f"{name}/", depth))
            lines.extend(render(child, depth + 1))
        else:
            lines.append(prefix + _LEAF_STYLE[child.kind](name))
    return lines


def job_header(result: JobResult) -> str:
    job = result.job
    return fmt(
        f"Diff for '{job.source}' (mode: {job.mode.value}) to '{job.target}'",
        "underline",
    )


def render_report(results: Iterable[JobResult]) -> List[str]:
    """All report lines for *results*, in job order."""
    lines: List[str] = []
    for result in results:
        lines.extend(["", job_header(result), ""])
        if result.has_changes:
            lines.extend(render(result.diff))
        else:
            lines.append(fmt(f"No changes for '{result.job.source}'", "cyan", "bold"))
    return lines


def write_report(results: Iterable[JobResult], out: IO[str]) -> None:
    for line in render_report(results):
        out.write(line + "\n")
