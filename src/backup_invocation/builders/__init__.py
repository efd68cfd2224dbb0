"""Argument builders for dumpling, BR and rclone.

Every builder is a pure function of its inputs and returns a new list.

Usage:
    from backup_invocation.builders import (
        construct_dumpling_options_for_backup,
        construct_br_global_options_for_backup,
        construct_rclone_args,
    )
"""

from backup_invocation.builders.br import (
    construct_br_args_for_backup,
    construct_br_args_for_restore,
    construct_br_global_options_for_backup,
    construct_br_global_options_for_restore,
)
from backup_invocation.builders.dumpling import (
    construct_dumpling_args,
    construct_dumpling_options_for_backup,
)
from backup_invocation.builders.precedence import filter_args, first_non_empty
from backup_invocation.builders.rclone import RcloneCommandClass, construct_rclone_args
from backup_invocation.builders.storage import get_storage_path
from backup_invocation.builders.version import suffix

__all__ = [
    "construct_br_args_for_backup",
    "construct_br_args_for_restore",
    "construct_br_global_options_for_backup",
    "construct_br_global_options_for_restore",
    "construct_dumpling_args",
    "construct_dumpling_options_for_backup",
    "construct_rclone_args",
    "filter_args",
    "first_non_empty",
    "get_storage_path",
    "RcloneCommandClass",
    "suffix",
]
