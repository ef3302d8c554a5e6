"""Data models for the change tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Union

from batchsync.config.schema import Job


class ChangeKind(str, Enum):
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class Leaf:
    """A changed file."""

    kind: ChangeKind


@dataclass
class Directory:
    """A directory node; children keep insertion order."""

    children: Dict[str, "DiffNode"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.children)

    @property
    def is_empty(self) -> bool:
        return not self.children

    def sorted_items(self):
        """Children in ascending key order (rendering order)."""
        return sorted(self.children.items())

    def count_leaves(self) -> int:
        total = 0
        for node in self.children.values():
            total += node.count_leaves() if isinstance(node, Directory) else 1
        return total


DiffNode = Union[Leaf, Directory]


@dataclass
class JobResult:
    """Outcome of one job's dry run."""

    job: Job
    diff: Directory = field(default_factory=Directory)

    @property
    def has_changes(self) -> bool:
        return not self.diff.is_empty
