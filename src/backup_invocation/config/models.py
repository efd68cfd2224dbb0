"""Pydantic models for backup and restore job specs."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from backup_invocation.constants import (
    DEFAULT_TIDB_PORT,
    DEFAULT_TIDB_USER,
    RCLONE_CONFIG_PATH,
)


# ============================================================================
# Storage Providers
# ============================================================================


class S3StorageProvider(BaseModel):
    """S3-compatible object store (AWS, Ceph, MinIO, ...)."""

    kind: Literal["s3"] = "s3"
    bucket: str
    provider: str = ""      # access-provider tag passed as --s3.provider
    endpoint: str = ""      # empty means the provider's default endpoint
    secret_name: str = ""   # credential reference, resolved by the executor
    region: str = ""
    prefix: str = ""


class GcsStorageProvider(BaseModel):
    """Google Cloud Storage bucket."""

    kind: Literal["gcs"] = "gcs"
    bucket: str
    secret_name: str = ""
    project_id: str = ""
    prefix: str = ""


StorageProvider = Annotated[
    S3StorageProvider | GcsStorageProvider,
    Field(discriminator="kind"),
]


# ============================================================================
# Tool Blocks
# ============================================================================


class BackupType(str, Enum):
    """Breadth of a job."""

    FULL = "full"
    DB = "db"
    TABLE = "table"


class TiDBAccessConfig(BaseModel):
    """Connection details of the cluster being dumped or restored into."""

    host: str
    port: int = DEFAULT_TIDB_PORT
    user: str = DEFAULT_TIDB_USER
    secret_name: str = ""


class DumplingConfig(BaseModel):
    """Overrides for the logical dump tool."""

    options: list[str] = Field(default_factory=list)
    table_filter: list[str] = Field(default_factory=list)


class BRConfig(BaseModel):
    """Distributed backup tool block."""

    cluster: str
    cluster_namespace: str = ""
    db: str = ""
    table: str = ""


# ============================================================================
# Job Specs
# ============================================================================


class _JobSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: BackupType = BackupType.FULL
    table_filter: list[str] = Field(default_factory=list)
    storage_provider: StorageProvider | None = None
    br: BRConfig | None = None
    storage_class_name: str | None = None
    storage_size: str = ""
    tool_version: str = ""


class BackupSpec(_JobSpec):
    """Declarative description of one backup job."""

    from_: TiDBAccessConfig | None = Field(default=None, alias="from")
    dumpling: DumplingConfig | None = None


class RestoreSpec(_JobSpec):
    """Declarative description of one restore job."""

    to: TiDBAccessConfig | None = None


# ============================================================================
# Job File
# ============================================================================


class RcloneSettings(BaseModel):
    """Sync tool settings from the [rclone] table."""

    config_path: str = RCLONE_CONFIG_PATH
    options: list[str] = Field(default_factory=list)
    verbose_log: bool = False


class JobConfig(BaseModel):
    """Complete job file: at most one backup and one restore spec."""

    backup: BackupSpec | None = None
    restore: RestoreSpec | None = None
    rclone: RcloneSettings = Field(default_factory=RcloneSettings)
