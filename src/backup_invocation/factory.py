"""Result-returning entry points for the reconcile loop.

The builders raise on bad input; these wrappers turn every expected failure
into a result value so a failed build is recorded as job status instead of
aborting the caller.

Usage:
    >>> result = build_br_backup_invocation(spec)
    >>> if result.success:
    ...     executor.run("br", result.args)
    ... else:
    ...     status.record_failure(result.error)
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from backup_invocation.builders.br import (
    construct_br_args_for_backup,
    construct_br_args_for_restore,
)
from backup_invocation.builders.dumpling import construct_dumpling_args
from backup_invocation.builders.rclone import construct_rclone_args
from backup_invocation.builders.version import suffix
from backup_invocation.config.models import BackupSpec, RestoreSpec
from backup_invocation.constants import RCLONE_CONFIG_PATH
from backup_invocation.exceptions import MetadataFormatError, UnknownStorageProviderError
from backup_invocation.metadata import get_commit_ts_from_metadata
from backup_invocation.models import CommitTsResult, InvocationResult

logger = logging.getLogger(__name__)


def _suffix_for(spec: BackupSpec | RestoreSpec) -> str | None:
    if not spec.tool_version:
        return None
    return suffix(spec.tool_version)


def build_dumpling_invocation(backup: BackupSpec, output_dir: str = "") -> InvocationResult:
    """Build a dumpling invocation. Always succeeds."""
    return InvocationResult(
        success=True,
        tool="dumpling",
        args=construct_dumpling_args(backup, output_dir),
        suffix=_suffix_for(backup),
    )


def build_br_backup_invocation(backup: BackupSpec) -> InvocationResult:
    """Build a ``br backup`` invocation.

    Returns:
        InvocationResult; ``success`` is False when the storage provider is
        missing.
    """
    try:
        args = construct_br_args_for_backup(backup)
    except UnknownStorageProviderError as e:
        logger.warning(f"BR backup invocation failed: {e}")
        return InvocationResult(success=False, tool="br", error=str(e))

    return InvocationResult(success=True, tool="br", args=args, suffix=_suffix_for(backup))


def build_br_restore_invocation(restore: RestoreSpec) -> InvocationResult:
    """Build a ``br restore`` invocation.

    Returns:
        InvocationResult; ``success`` is False when the storage provider is
        missing.
    """
    try:
        args = construct_br_args_for_restore(restore)
    except UnknownStorageProviderError as e:
        logger.warning(f"BR restore invocation failed: {e}")
        return InvocationResult(success=False, tool="br", error=str(e))

    return InvocationResult(success=True, tool="br", args=args, suffix=_suffix_for(restore))


def build_rclone_invocation(
    command: str,
    source: str,
    dest: str = "",
    opts: Sequence[str] | None = None,
    verbose_log: bool = False,
    config_path: str = RCLONE_CONFIG_PATH,
) -> InvocationResult:
    """Build an rclone invocation. Always succeeds."""
    args = construct_rclone_args(config_path, opts, command, source, dest, verbose_log)
    return InvocationResult(success=True, tool="rclone", args=args)


def read_commit_ts(directory: str | Path) -> CommitTsResult:
    """Read the commit position of a finished dump.

    A failure may be transient while dumpling is still writing, so the
    caller decides whether to retry.
    """
    try:
        commit_ts = get_commit_ts_from_metadata(directory)
    except MetadataFormatError as e:
        logger.warning(f"Reading commit ts from {directory} failed: {e}")
        return CommitTsResult(success=False, error=str(e))

    logger.debug(f"Commit ts for {directory} is {commit_ts}")
    return CommitTsResult(success=True, commit_ts=commit_ts)
