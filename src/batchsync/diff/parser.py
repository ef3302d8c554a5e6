"""rsync ``--itemize-changes`` parser and change-tree builder.

The dry-run report looks like::

    sending incremental file list
    *deleting   old/file.txt
    >f+++++++++ new/file.txt
    >f.st...... changed/file.txt
    cd+++++++++ new/

    sent 1.23K bytes  received 45 bytes  2.55K bytes/sec
    total size is 9.87M  speedup is 7,766.74 (DRY RUN)

Only the first paragraph after the header line carries changes.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Tuple

from batchsync.diff.models import ChangeKind, Directory, Leaf

_DELETE_PREFIX = "*deleting"
_CREATE_PREFIX = ">f+"  # file received, change flags start with "created"
_FLAGS_RE = re.compile(r"[^ ]+ +")
_CREATED_DIR = "created directory "  # printed when the target root is new


class DiffTreeError(Exception):
    """Raised when a path needs a directory where a file already is (or vice versa)."""


def change_lines(report: str) -> Iterator[str]:
    """Yield the itemized lines of *report*, skipping directory entries."""
    lines = report.split("\n")
    for line in lines[1:]:  # header
        if line.endswith("\r"):
            line = line[:-1]
        if not line:
            break
        if line.endswith("/") or line.startswith(_CREATED_DIR):
            continue
        yield line


def classify_line(line: str) -> Tuple[str, ChangeKind]:
    """Return ``(path, kind)`` for one itemized change line.

    Anything that is neither a deletion nor a created file counts as
    modified. A line without a flags column keeps its full text as path.
    """
    if line.startswith(_DELETE_PREFIX):
        kind = ChangeKind.DELETED
    elif line.startswith(_CREATE_PREFIX):
        kind = ChangeKind.ADDED
    else:
        kind = ChangeKind.MODIFIED
    return _FLAGS_RE.sub("", line, count=1), kind


def build_tree(changes: Iterable[Tuple[str, ChangeKind]]) -> Directory:
    """Fold ``(path, kind)`` pairs into a Directory keyed by path segment.

    A path reported twice keeps the last kind.
    """
    root = Directory()
    for path, kind in changes:
        *parents, name = path.split("/")
        node = root
        for segment in parents:
            child = node.children.setdefault(segment, Directory())
            if not isinstance(child, Directory):
                raise DiffTreeError(f"'{path}' lies below the changed file '{segment}'")
            node = child
        if isinstance(node.children.get(name), Directory):
            raise DiffTreeError(f"'{path}' is reported as a file but has changed entries below it")
        node.children[name] = Leaf(kind)
    return root


def parse_report(report: str, *, include_deletions: bool = True) -> Directory:
    """Turn a whole dry-run report into a change tree."""
    changes: List[Tuple[str, ChangeKind]] = []
    for line in change_lines(report):
        path, kind = classify_line(line)
        if kind is ChangeKind.DELETED and not include_deletions:
            continue
        changes.append((path, kind))
    return build_tree(changes)
