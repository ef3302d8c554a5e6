"""batchsync — preview and run batches of rsync jobs."""

__version__ = "0.1.0"
