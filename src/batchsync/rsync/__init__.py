"""rsync interface layer."""

from batchsync.rsync.adapter import RsyncError, build_args, dry_run, sync

__all__ = ["RsyncError", "build_args", "dry_run", "sync"]
