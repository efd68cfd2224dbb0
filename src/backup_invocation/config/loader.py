"""TOML loader for backup/restore job files."""

import tomllib
from pathlib import Path
from typing import Any

from backup_invocation.exceptions import UnknownStorageProviderError
from backup_invocation.config.models import JobConfig

_PROVIDER_KINDS = ("s3", "gcs")


def _normalize_storage(storage: dict[str, Any]) -> dict[str, Any] | None:
    """Flatten a ``[storage.s3]`` / ``[storage.gcs]`` table into tagged form.

    A table that already carries ``kind`` is returned unchanged. An empty
    table yields None so the missing provider surfaces when the job is built.

    Raises:
        UnknownStorageProviderError: If more than one provider is declared,
            or ``kind`` is combined with a nested provider table.
    """
    declared = [kind for kind in _PROVIDER_KINDS if kind in storage]

    if "kind" in storage:
        if declared:
            raise UnknownStorageProviderError(
                f"Ambiguous storage provider: kind={storage['kind']!r} and "
                f"[storage.{declared[0]}] are both set"
            )
        return storage

    if len(declared) > 1:
        raise UnknownStorageProviderError(
            f"Ambiguous storage provider: {', '.join(declared)} are all set"
        )
    if not declared:
        return None

    kind = declared[0]
    return {"kind": kind, **storage[kind]}


def _parse_job(data: dict[str, Any]) -> dict[str, Any]:
    job = dict(data)
    if "storage" in job:
        job["storage_provider"] = _normalize_storage(job.pop("storage"))
    return job


def load_job_config(config_path: Path | None = None) -> JobConfig:
    """Load a job file from TOML.

    Args:
        config_path: Path to the job file (default: ./backup.toml)

    Returns:
        JobConfig with the backup and/or restore spec

    Raises:
        FileNotFoundError: If the job file doesn't exist
        UnknownStorageProviderError: If a job declares two storage providers
        pydantic.ValidationError: If a field has the wrong shape
    """
    if config_path is None:
        config_path = Path.cwd() / "backup.toml"

    if not config_path.exists():
        raise FileNotFoundError(f"Job config not found: {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    parsed: dict[str, Any] = {}
    for section in ("backup", "restore"):
        if section in data:
            parsed[section] = _parse_job(data[section])
    if "rclone" in data:
        parsed["rclone"] = data["rclone"]

    return JobConfig.model_validate(parsed)
