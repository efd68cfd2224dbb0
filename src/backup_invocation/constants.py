"""Static contracts shared with the external tools.

These values are matched exactly by the tools and by the process executor,
so they are kept in one place and never computed.
"""

# rclone reads its remotes from this file, written by the executor.
RCLONE_CONFIG_PATH = "/tmp/rclone.conf"

# Name of the file dumpling writes into its output directory.
METADATA_FILE = "metadata"

# Schemas that are never part of a logical dump.
DEFAULT_TABLE_REGEX = (
    "!/^(mysql|INFORMATION_SCHEMA|PERFORMANCE_SCHEMA|METRICS_SCHEMA|INSPECTION_SCHEMA)$/.*"
)

DEFAULT_TABLE_FILTER: tuple[str, ...] = ("*.*", DEFAULT_TABLE_REGEX)

DEFAULT_DUMPLING_OPTIONS: tuple[str, ...] = (
    "--threads=16",
    "--rows=10000",
)

# (major, minor) -> compatibility suffix, ascending. The last entry is the
# newest dialect and the fallback for anything not listed.
VERSION_SUFFIXES: tuple[tuple[tuple[int, int], str], ...] = (
    ((3, 1), "31"),
    ((4, 0), "40"),
)

DEFAULT_TIDB_PORT = 4000
DEFAULT_TIDB_USER = "root"
