"""Argument builder for rclone.

Listing output is parsed by the caller, so verbose log lines must never be
mixed into it. Transfers may log verbosely unless the user asked for quiet.
"""

import re
from collections.abc import Sequence
from enum import Enum

from backup_invocation.constants import RCLONE_CONFIG_PATH

# -v, -vv, -vvv, --verbose, and their "=<n>" forms.
_VERBOSE_RE = re.compile(r"^(-v+|--verbose)(=\d+)?$")

_QUIET = "-q"


class RcloneCommandClass(Enum):
    """Verbosity policy for an rclone command."""

    LISTING = "listing"
    TRANSFER = "transfer"

    @classmethod
    def of(cls, command: str) -> "RcloneCommandClass":
        if command in _LISTING_COMMANDS:
            return cls.LISTING
        return cls.TRANSFER


_LISTING_COMMANDS = frozenset({"ls", "lsl", "lsd", "lsf", "lsjson"})


def is_verbose_option(opt: str) -> bool:
    """True for any rclone verbosity flag."""
    return _VERBOSE_RE.match(opt) is not None


def construct_rclone_args(
    config_path: str,
    opts: Sequence[str] | None,
    command: str,
    source: str,
    dest: str,
    verbose_log: bool,
) -> list[str]:
    """Build an rclone argument list.

    Args:
        config_path: rclone config file, emitted as ``--config=<path>``.
        opts: User-supplied rclone options, kept in order.
        command: rclone subcommand (``ls``, ``copyto``, ...).
        source: Source path or remote.
        dest: Destination path or remote. Omitted when empty.
        verbose_log: Request one extra ``-v`` for transfer commands.

    Returns:
        ``--config=...``, options, then command, source and dest.

    Examples:
        >>> construct_rclone_args("/tmp/rclone.conf", ["-vv", "--fast-list"], "ls", "s3:b", "", True)
        ['--config=/tmp/rclone.conf', '--fast-list', 'ls', 's3:b']
        >>> construct_rclone_args("/tmp/rclone.conf", ["-q"], "copyto", "a", "b", True)
        ['--config=/tmp/rclone.conf', '-q', 'copyto', 'a', 'b']
    """
    opts = [opt for opt in (opts or ()) if opt]
    args = [f"--config={config_path or RCLONE_CONFIG_PATH}"]

    if RcloneCommandClass.of(command) is RcloneCommandClass.LISTING:
        args.extend(opt for opt in opts if not is_verbose_option(opt))
    else:
        args.extend(opts)
        if verbose_log and _QUIET not in opts:
            args.append("-v")

    args.extend(token for token in (command, source, dest) if token)
    return args
