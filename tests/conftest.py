"""Shared job-spec fixtures."""

import pytest

from backup_invocation.config.models import (
    BackupSpec,
    RestoreSpec,
    S3StorageProvider,
    TiDBAccessConfig,
)


def _ceph_storage() -> S3StorageProvider:
    return S3StorageProvider(
        provider="ceph",
        endpoint="http://10.0.0.1",
        bucket="test1-demo1",
        secret_name="demo",
    )


@pytest.fixture
def backup() -> BackupSpec:
    """Backup from 10.1.1.2 into a Ceph bucket."""
    return BackupSpec(
        from_=TiDBAccessConfig(host="10.1.1.2", secret_name="demo1-tidb-secret"),
        storage_provider=_ceph_storage(),
        storage_class_name="local-storage",
        storage_size="1Gi",
    )


@pytest.fixture
def restore() -> RestoreSpec:
    """Restore from a Ceph bucket into 10.1.1.2."""
    return RestoreSpec(
        to=TiDBAccessConfig(host="10.1.1.2", secret_name="demo1-tidb-secret"),
        storage_provider=_ceph_storage(),
        storage_class_name="local-storage",
        storage_size="1Gi",
    )
