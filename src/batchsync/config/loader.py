"""Load the job list from TOML or YAML, expand paths, and validate."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]

import yaml

from batchsync.config.schema import Job, Mode, OptionsConfig, SyncConfig

_REQUIRED_FIELDS = ("source", "target", "mode")
_VALID_MODES = tuple(m.value for m in Mode)


class ConfigError(Exception):
    """Raised when the job list is missing, malformed, or invalid.

    All problems found in one validation phase are collected in *errors*.
    """

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = list(errors)
        super().__init__("\n".join(self.errors))


def _parse_file(path: Path) -> Any:
    try:
        if path.suffix in (".yaml", ".yml"):
            with open(path, encoding="utf-8") as f:
                return yaml.safe_load(f)
        with open(path, "rb") as f:
            return tomllib.load(f)
    except Exception as exc:
        raise ConfigError([f"Failed to parse {path}: {exc}"]) from exc


def _raw_jobs(data: Any, path: Path) -> List[Any]:
    """Return the list of job records; YAML may be a bare list."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("jobs", []), list):
        return data.get("jobs", [])
    raise ConfigError([f"The config file '{path}' must contain a list of jobs"])


def _build_options(data: Any) -> OptionsConfig:
    """Build OptionsConfig from the ``options`` section, ignoring unknown keys."""
    import dataclasses

    section = (data.get("options") if isinstance(data, dict) else None) or {}
    if not isinstance(section, dict):
        raise ConfigError(["The options section must be a table of settings"])

    valid_fields = {f.name for f in dataclasses.fields(OptionsConfig)}
    options = {k: v for k, v in section.items() if k in valid_fields}

    errors: List[str] = []
    for name in ("pager", "rsync"):
        if name in options and not isinstance(options[name], str):
            errors.append(f"Option '{name}' must be a string, got {options[name]!r}")
    max_tries = options.get("max_tries", 1)
    if isinstance(max_tries, bool) or not isinstance(max_tries, int):
        errors.append(f"Option 'max_tries' must be an integer, got {max_tries!r}")
    if errors:
        raise ConfigError(errors)
    return OptionsConfig(**options)


def _merge_env_overrides(options: OptionsConfig) -> None:
    """Apply BATCHSYNC_* environment variable overrides."""
    if val := os.environ.get("BATCHSYNC_PAGER"):
        options.pager = val
    if val := os.environ.get("BATCHSYNC_RSYNC"):
        options.rsync = val
    if val := os.environ.get("BATCHSYNC_MAX_TRIES"):
        try:
            options.max_tries = int(val)
        except ValueError:
            pass


def expand(path: str) -> str:
    """Expand ``~`` and make sure the path ends with exactly one ``/``."""
    return str(Path(path).expanduser()).rstrip("/") + "/"


def prepare_job(record: Dict[str, Any], target_root: str) -> Dict[str, str]:
    """Expand the source and place the target below *target_root*."""
    root = target_root if target_root.endswith("/") else target_root + "/"
    target = str(record["target"])
    if target.startswith("/"):
        target = target[1:]
    return {
        "source": expand(str(record["source"])),
        "target": expand(root + target),
        "mode": str(record["mode"]),
    }


def validate_input(config_path: Path, target_root: Path) -> None:
    """Check the two command-line paths before anything is read."""
    errors: List[str] = []
    if not config_path.exists():
        errors.append(f"The config file '{config_path}' does not exist")
    if not target_root.is_dir():
        errors.append(
            f"The target location '{target_root}' does not exist or is not a directory"
        )
    if errors:
        raise ConfigError(errors)


def validate_jobs(records: List[Dict[str, str]]) -> None:
    errors: List[str] = []
    for record in records:
        if not Path(record["source"]).is_dir():
            errors.append(f"Source '{record['source']}' is not an existing directory")
        if record["mode"] not in _VALID_MODES:
            errors.append(
                f"Mode of '{record['source']}' can only be "
                + " or ".join(repr(m) for m in _VALID_MODES)
                + f", got {record['mode']!r}"
            )
    if errors:
        raise ConfigError(errors)


def load_config(
    config_path: Path,
    target_root: Path,
    *,
    pager: Optional[str] = None,
    max_tries: Optional[int] = None,
) -> SyncConfig:
    """Load, expand, validate, and return the SyncConfig.

    Keyword arguments override the file and environment settings.
    """
    validate_input(config_path, target_root)

    data = _parse_file(config_path)
    raw = _raw_jobs(data or {}, config_path)

    errors: List[str] = []
    for idx, record in enumerate(raw, start=1):
        if not isinstance(record, dict):
            errors.append(f"Job #{idx} is not a table of source, target and mode")
            continue
        missing = [name for name in _REQUIRED_FIELDS if name not in record]
        if missing:
            errors.append(f"Job #{idx} is missing: {', '.join(missing)}")
    if errors:
        raise ConfigError(errors)

    records = [prepare_job(record, str(target_root)) for record in raw]
    validate_jobs(records)

    options = _build_options(data)
    _merge_env_overrides(options)
    if pager:
        options.pager = pager
    if max_tries is not None:
        options.max_tries = max_tries

    jobs = [
        Job(source=r["source"], target=r["target"], mode=Mode(r["mode"]))
        for r in records
    ]
    return SyncConfig(jobs=jobs, options=options)
