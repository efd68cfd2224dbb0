"""Tests for dumpling argument construction."""

import pytest

from backup_invocation.builders.dumpling import (
    construct_dumpling_args,
    construct_dumpling_options_for_backup,
)
from backup_invocation.config.models import BackupSpec, DumplingConfig

DEFAULT_FILTER_ARGS = [
    "--filter",
    "*.*",
    "--filter",
    "!/^(mysql|INFORMATION_SCHEMA|PERFORMANCE_SCHEMA|METRICS_SCHEMA|INSPECTION_SCHEMA)$/.*",
]
DEFAULT_OPTIONS = ["--threads=16", "--rows=10000"]

BACKUP_FILTER = ["mysql.*"]
DUMPLING_FILTER = ["mysql2.*"]
CUSTOM_OPTIONS = ["--consistency=snapshot"]


class TestConstructDumplingOptionsForBackup:
    """Filter and option precedence across every combination."""

    @pytest.mark.parametrize("has_options", [False, True])
    @pytest.mark.parametrize("has_dumpling_filter", [False, True])
    @pytest.mark.parametrize("has_backup_filter", [False, True])
    def test_precedence_matrix(
        self,
        backup: BackupSpec,
        has_backup_filter: bool,
        has_dumpling_filter: bool,
        has_options: bool,
    ) -> None:
        expect: list[str] = []

        if has_backup_filter or has_dumpling_filter or has_options:
            backup.dumpling = DumplingConfig()

        if has_backup_filter:
            backup.table_filter = BACKUP_FILTER
        if has_dumpling_filter:
            backup.dumpling.table_filter = DUMPLING_FILTER
        if has_options:
            backup.dumpling.options = CUSTOM_OPTIONS

        if has_backup_filter:
            expect += ["--filter", BACKUP_FILTER[0]]
        elif has_dumpling_filter:
            expect += ["--filter", DUMPLING_FILTER[0]]
        else:
            expect += DEFAULT_FILTER_ARGS

        expect += CUSTOM_OPTIONS if has_options else DEFAULT_OPTIONS

        assert construct_dumpling_options_for_backup(backup) == expect

    def test_defaults_without_dumpling_block(self, backup: BackupSpec) -> None:
        assert backup.dumpling is None
        assert construct_dumpling_options_for_backup(backup) == DEFAULT_FILTER_ARGS + DEFAULT_OPTIONS

    def test_pattern_order_preserved(self, backup: BackupSpec) -> None:
        backup.table_filter = ["b.*", "a.*", "c.t"]
        args = construct_dumpling_options_for_backup(backup)
        assert args[:6] == ["--filter", "b.*", "--filter", "a.*", "--filter", "c.t"]

    def test_options_replace_defaults_entirely(self, backup: BackupSpec) -> None:
        backup.dumpling = DumplingConfig(options=["--threads=4"])
        args = construct_dumpling_options_for_backup(backup)
        assert args[-1] == "--threads=4"
        assert "--rows=10000" not in args

    def test_idempotent(self, backup: BackupSpec) -> None:
        backup.dumpling = DumplingConfig(table_filter=["x.*", "y.*"], options=["-F", "64MiB"])
        assert construct_dumpling_options_for_backup(backup) == construct_dumpling_options_for_backup(backup)


class TestConstructDumplingArgs:
    """Connection flags ahead of the options."""

    def test_connection_then_options(self, backup: BackupSpec) -> None:
        args = construct_dumpling_args(backup, "/data/dump")
        assert args[:4] == [
            "--outputdir=/data/dump",
            "--host=10.1.1.2",
            "--port=4000",
            "--user=root",
        ]
        assert args[4:] == DEFAULT_FILTER_ARGS + DEFAULT_OPTIONS

    def test_no_source_no_output_dir(self) -> None:
        args = construct_dumpling_args(BackupSpec(), "")
        assert args == DEFAULT_FILTER_ARGS + DEFAULT_OPTIONS

    def test_no_password_in_args(self, backup: BackupSpec) -> None:
        args = construct_dumpling_args(backup, "/data/dump")
        assert not any(arg.startswith("--password") for arg in args)
