"""Storage provider -> destination URI.

The S3 URI carries no trailing separator while the GCS URI does. BR and
rclone both depend on these exact shapes, so the asymmetry is kept.
"""

from backup_invocation.config.models import (
    GcsStorageProvider,
    S3StorageProvider,
    StorageProvider,
)
from backup_invocation.exceptions import UnknownStorageProviderError


def get_storage_path(provider: StorageProvider | None) -> str:
    """Resolve a storage provider to its bucket URI.

    Args:
        provider: S3 or GCS provider, or None when the job declared none.

    Returns:
        ``s3://<bucket>`` or ``gcs://<bucket>/``

    Raises:
        UnknownStorageProviderError: If no known provider is populated.

    Examples:
        >>> get_storage_path(S3StorageProvider(bucket="demo"))
        's3://demo'
        >>> get_storage_path(GcsStorageProvider(bucket="demo"))
        'gcs://demo/'
    """
    if isinstance(provider, S3StorageProvider):
        return f"s3://{provider.bucket}"
    if isinstance(provider, GcsStorageProvider):
        return f"gcs://{provider.bucket}/"
    raise UnknownStorageProviderError("Unknown storage provider: no provider configured")


def s3_extra_options(provider: StorageProvider | None) -> list[str]:
    """Provider-specific BR flags; only S3 contributes any."""
    if not isinstance(provider, S3StorageProvider):
        return []

    args = [f"--s3.provider={provider.provider}"]
    if provider.endpoint:
        args.append(f"--s3.endpoint={provider.endpoint}")
    return args
