"""Argument builder for dumpling logical backups.

Filter priority: backup ``table_filter`` > ``dumpling.table_filter`` >
default filter. Option priority: ``dumpling.options`` > default options.
Each winner is used whole; levels are never combined.
"""

import logging

from backup_invocation.builders.precedence import filter_args, first_non_empty
from backup_invocation.config.models import BackupSpec
from backup_invocation.constants import DEFAULT_DUMPLING_OPTIONS, DEFAULT_TABLE_FILTER

logger = logging.getLogger(__name__)


def construct_dumpling_options_for_backup(backup: BackupSpec) -> list[str]:
    """Build dumpling filter and option arguments for a backup.

    Args:
        backup: Backup job spec.

    Returns:
        ``--filter`` pairs for the winning filter set, followed by the
        winning option list verbatim.
    """
    dumpling_filter = backup.dumpling.table_filter if backup.dumpling is not None else None
    dumpling_options = backup.dumpling.options if backup.dumpling is not None else None

    patterns = first_non_empty(backup.table_filter, dumpling_filter, DEFAULT_TABLE_FILTER)
    options = first_non_empty(dumpling_options, None, DEFAULT_DUMPLING_OPTIONS)

    logger.debug(f"dumpling filter={patterns} options={options}")
    return filter_args(patterns) + options


def construct_dumpling_args(backup: BackupSpec, output_dir: str) -> list[str]:
    """Full dumpling argument list: output directory, connection, then options.

    The password is not part of the argument list; the executor supplies it
    through the environment.
    """
    args = [f"--outputdir={output_dir}"] if output_dir else []

    source = backup.from_
    if source is not None:
        args.extend(
            [
                f"--host={source.host}",
                f"--port={source.port}",
                f"--user={source.user}",
            ]
        )

    args.extend(construct_dumpling_options_for_backup(backup))
    return args
