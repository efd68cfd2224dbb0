"""CLI for inspecting the invocations built from a job file.

Prints the exact argument list a job would hand to the process executor,
without running any tool.

Usage:
    backup-invocation dumpling --config backup.toml --output-dir /data/dump
    backup-invocation br-backup --config backup.toml
    backup-invocation br-restore --config backup.toml
    backup-invocation rclone copyto /data/dump s3:bucket/dump --verbose-log
    backup-invocation rclone ls s3:bucket --opt=--fast-list --opt=-q
    backup-invocation commit-ts /data/dump
    backup-invocation suffix v4.0.8

Commands:
    dumpling    - Logical dump arguments for the [backup] job
    br-backup   - BR backup arguments for the [backup] job
    br-restore  - BR restore arguments for the [restore] job
    rclone      - rclone arguments using the [rclone] settings
    commit-ts   - Commit position from a dumpling output directory
    suffix      - Compatibility suffix for a tool version
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from backup_invocation.builders.version import suffix
from backup_invocation.config.loader import load_job_config
from backup_invocation.config.models import JobConfig, RcloneSettings
from backup_invocation.exceptions import UnknownStorageProviderError
from backup_invocation.factory import (
    build_br_backup_invocation,
    build_br_restore_invocation,
    build_dumpling_invocation,
    build_rclone_invocation,
    read_commit_ts,
)
from backup_invocation.models import InvocationResult

console = Console()


# ============================================================================
# Helpers
# ============================================================================


def _load(args: argparse.Namespace) -> JobConfig | None:
    """Load the job file, printing the error and returning None on failure."""
    config_path = Path(args.config) if args.config else None
    try:
        return load_job_config(config_path)
    except (FileNotFoundError, UnknownStorageProviderError, ValidationError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return None


def _print_result(result: InvocationResult, as_json: bool) -> int:
    if as_json:
        console.print_json(result.model_dump_json())
        return 0 if result.success else 1

    if not result.success:
        console.print(f"[bold red]x[/bold red] {escape(result.error or '')}")
        return 1

    table = Table(title=f"{result.tool} arguments", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Argument")
    for index, arg in enumerate(result.args):
        table.add_row(str(index), escape(arg))

    console.print(table)
    if result.suffix:
        console.print(f"Compatibility suffix: [bold cyan]{result.suffix}[/bold cyan]")
    return 0


# ============================================================================
# Commands
# ============================================================================


def cmd_dumpling(args: argparse.Namespace) -> int:
    """Print dumpling arguments for the [backup] job."""
    config = _load(args)
    if config is None:
        return 1
    if config.backup is None:
        console.print("[yellow]No \\[backup] job in config.[/yellow]")
        return 1

    result = build_dumpling_invocation(config.backup, output_dir=args.output_dir or "")
    return _print_result(result, args.json)


def cmd_br_backup(args: argparse.Namespace) -> int:
    """Print BR backup arguments for the [backup] job."""
    config = _load(args)
    if config is None:
        return 1
    if config.backup is None:
        console.print("[yellow]No \\[backup] job in config.[/yellow]")
        return 1

    return _print_result(build_br_backup_invocation(config.backup), args.json)


def cmd_br_restore(args: argparse.Namespace) -> int:
    """Print BR restore arguments for the [restore] job."""
    config = _load(args)
    if config is None:
        return 1
    if config.restore is None:
        console.print("[yellow]No \\[restore] job in config.[/yellow]")
        return 1

    return _print_result(build_br_restore_invocation(config.restore), args.json)


def cmd_rclone(args: argparse.Namespace) -> int:
    """Print rclone arguments.

    Settings come from the job file's [rclone] table when ``--config`` is
    given; ``--opt`` and ``--verbose-log`` override them. rclone options
    start with ``-``, so ``--opt`` takes them in ``--opt=<option>`` form.
    """
    settings = RcloneSettings()
    if args.config:
        config = _load(args)
        if config is None:
            return 1
        settings = config.rclone

    result = build_rclone_invocation(
        command=args.rclone_command,
        source=args.source,
        dest=args.dest or "",
        opts=args.opts if args.opts else settings.options,
        verbose_log=args.verbose_log or settings.verbose_log,
        config_path=settings.config_path,
    )
    return _print_result(result, args.json)


def cmd_commit_ts(args: argparse.Namespace) -> int:
    """Print the commit position of a finished dump."""
    result = read_commit_ts(args.directory)

    if args.json:
        console.print_json(result.model_dump_json())
    elif result.success:
        console.print(result.commit_ts)
    else:
        console.print(f"[bold red]x[/bold red] {escape(result.error or '')}")

    return 0 if result.success else 1


def cmd_suffix(args: argparse.Namespace) -> int:
    """Print the compatibility suffix for a version."""
    code = suffix(args.version)
    if args.json:
        console.print_json(json.dumps({"version": args.version, "suffix": code}))
    else:
        console.print(code)
    return 0


# ============================================================================
# Main entry point
# ============================================================================


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for errors).
    """
    parser = argparse.ArgumentParser(
        prog="backup-invocation",
        description="Build dumpling, BR and rclone invocations from backup job files",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # dumpling command
    p_dumpling = subparsers.add_parser("dumpling", help="Logical dump arguments")
    p_dumpling.add_argument("--config", "-c", help="Job file (default: ./backup.toml)")
    p_dumpling.add_argument("--output-dir", "-o", help="Dump output directory")
    p_dumpling.set_defaults(func=cmd_dumpling)

    # br-backup command
    p_br_backup = subparsers.add_parser("br-backup", help="BR backup arguments")
    p_br_backup.add_argument("--config", "-c", help="Job file (default: ./backup.toml)")
    p_br_backup.set_defaults(func=cmd_br_backup)

    # br-restore command
    p_br_restore = subparsers.add_parser("br-restore", help="BR restore arguments")
    p_br_restore.add_argument("--config", "-c", help="Job file (default: ./backup.toml)")
    p_br_restore.set_defaults(func=cmd_br_restore)

    # rclone command
    p_rclone = subparsers.add_parser("rclone", help="rclone arguments")
    p_rclone.add_argument("rclone_command", help="rclone subcommand (ls, copyto, ...)")
    p_rclone.add_argument("source", help="Source path or remote")
    p_rclone.add_argument("dest", nargs="?", help="Destination path or remote")
    p_rclone.add_argument("--config", "-c", help="Job file with an [rclone] table")
    p_rclone.add_argument(
        "--opt",
        action="append",
        dest="opts",
        metavar="OPTION",
        help="rclone option as --opt=<option>, e.g. --opt=-q (can be used multiple times)",
    )
    p_rclone.add_argument(
        "--verbose-log",
        action="store_true",
        help="Add -v to transfer commands unless -q is given",
    )
    p_rclone.set_defaults(func=cmd_rclone)

    # commit-ts command
    p_commit_ts = subparsers.add_parser("commit-ts", help="Commit position of a dump")
    p_commit_ts.add_argument("directory", help="Dumpling output directory")
    p_commit_ts.set_defaults(func=cmd_commit_ts)

    # suffix command
    p_suffix = subparsers.add_parser("suffix", help="Compatibility suffix for a version")
    p_suffix.add_argument("version", help="Tool version, e.g. v4.0.8")
    p_suffix.set_defaults(func=cmd_suffix)

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
