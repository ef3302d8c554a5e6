"""Diff engine — classify rsync change lines and fold them into trees."""

from batchsync.diff.models import ChangeKind, DiffNode, Directory, JobResult, Leaf
from batchsync.diff.parser import (
    DiffTreeError,
    build_tree,
    change_lines,
    classify_line,
    parse_report,
)

__all__ = [
    "ChangeKind",
    "DiffNode",
    "DiffTreeError",
    "Directory",
    "JobResult",
    "Leaf",
    "build_tree",
    "change_lines",
    "classify_line",
    "parse_report",
]
