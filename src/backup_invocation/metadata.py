"""Commit position extraction from dumpling's ``metadata`` file.

The file looks like::

    Started dump at: 2019-06-13 10:00:04
        SHOW MASTER STATUS:
            Log: tidb-binlog
            Pos: 409054741514944513
            GTID:

    Finished dump at: 2019-06-13 10:00:04

``Pos`` is returned as a string: TiDB commit timestamps do not fit every
consumer's integer type.
"""

from pathlib import Path

from backup_invocation.constants import METADATA_FILE
from backup_invocation.exceptions import MetadataFormatError

_MASTER_STATUS_HEADER = "SHOW MASTER STATUS:"
_POS_FIELD = "Pos:"


def _section_ended(line: str) -> bool:
    return line.startswith("SHOW ") or line.startswith("Finished dump at:")


def parse_commit_ts(content: str) -> str:
    """Return the ``Pos`` value of the ``SHOW MASTER STATUS`` section.

    Raises:
        MetadataFormatError: If the section or a non-empty ``Pos`` is missing.
    """
    in_section = False
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        if line == _MASTER_STATUS_HEADER:
            in_section = True
            continue

        if not in_section:
            continue

        if _section_ended(line):
            break

        if line.startswith(_POS_FIELD):
            commit_ts = line[len(_POS_FIELD):].strip()
            if not commit_ts:
                raise MetadataFormatError("Empty Pos field in SHOW MASTER STATUS section")
            return commit_ts

    if not in_section:
        raise MetadataFormatError(f"No '{_MASTER_STATUS_HEADER}' section in metadata")
    raise MetadataFormatError(f"No '{_POS_FIELD}' field in SHOW MASTER STATUS section")


def get_commit_ts_from_metadata(directory: str | Path) -> str:
    """Read ``<directory>/metadata`` and return the commit position.

    Args:
        directory: Dumpling output directory.

    Returns:
        Commit position, e.g. ``"409054741514944513"``.

    Raises:
        MetadataFormatError: If the file cannot be read or has no position.
    """
    metadata_path = Path(directory) / METADATA_FILE
    try:
        content = metadata_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MetadataFormatError(f"Cannot read {metadata_path}: {e}") from e

    return parse_commit_ts(content)
