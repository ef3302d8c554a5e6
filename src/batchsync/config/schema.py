"""Configuration schema — jobs and tool options."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Mode(str, Enum):
    ADD = "add"  # new/changed files only, never remove anything
    DELETE = "delete"  # mirror the source, including removals


@dataclass(frozen=True)
class Job:
    """One source → target synchronisation task.

    Both paths are fully expanded and end with a single ``/`` so rsync
    syncs the directory contents rather than the directory itself.
    """

    source: str
    target: str
    mode: Mode

    @property
    def delete(self) -> bool:
        return self.mode is Mode.DELETE


@dataclass
class OptionsConfig:
    pager: str = "less"
    max_tries: int = 5  # confirmation prompt attempts
    rsync: str = "rsync"


@dataclass
class SyncConfig:
    jobs: List[Job] = field(default_factory=list)
    options: OptionsConfig = field(default_factory=OptionsConfig)
