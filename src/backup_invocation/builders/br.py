"""Argument builder for BR snapshot backup and restore.

Backup and restore share one layout:

1. ``--storage=<uri>``
2. ``--s3.provider`` / ``--s3.endpoint`` for S3 storage
3. ``--filter <pattern>`` for each job-level pattern
4. scope: ``--table=`` then ``--db=`` for a table, ``--db=`` for a database
"""

from backup_invocation.builders.precedence import filter_args
from backup_invocation.builders.storage import get_storage_path, s3_extra_options
from backup_invocation.config.models import BackupSpec, BackupType, RestoreSpec


def _construct_br_global_options(spec: BackupSpec | RestoreSpec) -> list[str]:
    args = [f"--storage={get_storage_path(spec.storage_provider)}"]
    args.extend(s3_extra_options(spec.storage_provider))

    # No dumpling-level fallback here: BR only honours the job filter.
    args.extend(filter_args(spec.table_filter))

    br = spec.br
    if br is None:
        return args

    # Blank names are skipped so no flag is emitted without a value.
    if spec.type == BackupType.TABLE and br.table:
        args.append(f"--table={br.table}")
    if spec.type in (BackupType.TABLE, BackupType.DB) and br.db:
        args.append(f"--db={br.db}")

    return args


def construct_br_global_options_for_backup(backup: BackupSpec) -> list[str]:
    """Build BR global options for a backup job.

    Raises:
        UnknownStorageProviderError: If the job has no storage provider.
    """
    return _construct_br_global_options(backup)


def construct_br_global_options_for_restore(restore: RestoreSpec) -> list[str]:
    """Build BR global options for a restore job.

    Raises:
        UnknownStorageProviderError: If the job has no storage provider.
    """
    return _construct_br_global_options(restore)


def construct_br_args_for_backup(backup: BackupSpec) -> list[str]:
    """``backup <scope>`` followed by the global options."""
    return ["backup", backup.type.value] + construct_br_global_options_for_backup(backup)


def construct_br_args_for_restore(restore: RestoreSpec) -> list[str]:
    """``restore <scope>`` followed by the global options."""
    return ["restore", restore.type.value] + construct_br_global_options_for_restore(restore)
