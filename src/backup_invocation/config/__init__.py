"""Job specs: pydantic models and TOML loading.

Usage:
    >>> from backup_invocation.config import load_job_config, BackupSpec, RestoreSpec
"""

from backup_invocation.config.loader import load_job_config
from backup_invocation.config.models import (
    BackupSpec,
    BackupType,
    BRConfig,
    DumplingConfig,
    GcsStorageProvider,
    JobConfig,
    RcloneSettings,
    RestoreSpec,
    S3StorageProvider,
    StorageProvider,
    TiDBAccessConfig,
)

__all__ = [
    "load_job_config",
    "BackupSpec",
    "BackupType",
    "BRConfig",
    "DumplingConfig",
    "GcsStorageProvider",
    "JobConfig",
    "RcloneSettings",
    "RestoreSpec",
    "S3StorageProvider",
    "StorageProvider",
    "TiDBAccessConfig",
]
