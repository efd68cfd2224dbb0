"""Tests for storage provider URI resolution."""

import pytest

from backup_invocation.builders.storage import (
    get_storage_path,
    s3_extra_options,
)
from backup_invocation.config.models import GcsStorageProvider, S3StorageProvider
from backup_invocation.exceptions import InvocationError, UnknownStorageProviderError


class TestGetStoragePath:
    """get_storage_path() URI shapes."""

    def test_s3_has_no_trailing_slash(self) -> None:
        provider = S3StorageProvider(bucket="test1-demo1", secret_name="demo")
        assert get_storage_path(provider) == "s3://test1-demo1"

    def test_gcs_has_trailing_slash(self) -> None:
        provider = GcsStorageProvider(bucket="test1-demo1", secret_name="demo")
        assert get_storage_path(provider) == "gcs://test1-demo1/"

    def test_no_provider_raises(self) -> None:
        with pytest.raises(UnknownStorageProviderError, match="Unknown storage provider"):
            get_storage_path(None)

    def test_error_is_invocation_error(self) -> None:
        """Callers can catch every surfaced error through the base class."""
        with pytest.raises(InvocationError):
            get_storage_path(None)

    def test_s3_ignores_endpoint_and_prefix(self) -> None:
        provider = S3StorageProvider(
            bucket="b", endpoint="http://10.0.0.1", provider="ceph", prefix="daily"
        )
        assert get_storage_path(provider) == "s3://b"


class TestS3ExtraOptions:
    """Provider-specific BR flags."""

    def test_provider_then_endpoint(self) -> None:
        provider = S3StorageProvider(bucket="b", provider="ceph", endpoint="http://10.0.0.1")
        assert s3_extra_options(provider) == [
            "--s3.provider=ceph",
            "--s3.endpoint=http://10.0.0.1",
        ]

    def test_empty_endpoint_omitted(self) -> None:
        provider = S3StorageProvider(bucket="b", provider="aws")
        assert s3_extra_options(provider) == ["--s3.provider=aws"]

    def test_gcs_contributes_nothing(self) -> None:
        assert s3_extra_options(GcsStorageProvider(bucket="b")) == []

    def test_none_contributes_nothing(self) -> None:
        assert s3_extra_options(None) == []
