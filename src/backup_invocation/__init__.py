"""backup-invocation: compile backup/restore jobs into tool invocations.

Builds the argument lists for dumpling, BR and rclone from declarative job
specs, and reads the commit position back from dumpling's metadata file.

Usage:
    from backup_invocation import BackupSpec, RestoreSpec, load_job_config
    from backup_invocation import build_br_backup_invocation, read_commit_ts
    from backup_invocation import construct_rclone_args, suffix
"""

__version__ = "0.1.0"

# Config
from backup_invocation.config.loader import load_job_config
from backup_invocation.config.models import (
    BackupSpec,
    BackupType,
    BRConfig,
    DumplingConfig,
    GcsStorageProvider,
    JobConfig,
    RestoreSpec,
    S3StorageProvider,
    TiDBAccessConfig,
)

# Builders
from backup_invocation.builders import (
    construct_br_global_options_for_backup,
    construct_br_global_options_for_restore,
    construct_dumpling_options_for_backup,
    construct_rclone_args,
    first_non_empty,
    get_storage_path,
    suffix,
)

# Metadata
from backup_invocation.metadata import get_commit_ts_from_metadata

# Errors
from backup_invocation.exceptions import MetadataFormatError, UnknownStorageProviderError

# Factory
from backup_invocation.factory import (
    build_br_backup_invocation,
    build_br_restore_invocation,
    build_dumpling_invocation,
    build_rclone_invocation,
    read_commit_ts,
)
from backup_invocation.models import CommitTsResult, InvocationResult

__all__ = [
    # Config
    "load_job_config",
    "BackupSpec",
    "BackupType",
    "BRConfig",
    "DumplingConfig",
    "GcsStorageProvider",
    "JobConfig",
    "RestoreSpec",
    "S3StorageProvider",
    "TiDBAccessConfig",
    # Builders
    "construct_br_global_options_for_backup",
    "construct_br_global_options_for_restore",
    "construct_dumpling_options_for_backup",
    "construct_rclone_args",
    "first_non_empty",
    "get_storage_path",
    "suffix",
    # Metadata
    "get_commit_ts_from_metadata",
    # Errors
    "MetadataFormatError",
    "UnknownStorageProviderError",
    # Factory
    "build_br_backup_invocation",
    "build_br_restore_invocation",
    "build_dumpling_invocation",
    "build_rclone_invocation",
    "read_commit_ts",
    "CommitTsResult",
    "InvocationResult",
]
