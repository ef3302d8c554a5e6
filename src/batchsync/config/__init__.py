"""Job-list loading, schema, and validation."""

from batchsync.config.loader import ConfigError, load_config
from batchsync.config.schema import Job, Mode, OptionsConfig, SyncConfig

__all__ = [
    "ConfigError",
    "Job",
    "Mode",
    "OptionsConfig",
    "SyncConfig",
    "load_config",
]
