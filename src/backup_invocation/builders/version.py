"""Tool version -> compatibility suffix."""

import logging
import re

from backup_invocation.constants import VERSION_SUFFIXES

logger = logging.getLogger(__name__)

# Leading "v" optional; anything after MAJOR.MINOR (patch, pre-release,
# build date) is ignored.
_VERSION_RE = re.compile(r"^v?(\d+)\.(\d+)")


def newest_suffix() -> str:
    """Suffix of the newest known dialect."""
    return VERSION_SUFFIXES[-1][1]


def parse_major_minor(version: str) -> tuple[int, int] | None:
    """Extract ``(major, minor)`` from a loosely shaped version string.

    Examples:
        >>> parse_major_minor("v4.0.0-20200909")
        (4, 0)
        >>> parse_major_minor("nightly") is None
        True
    """
    match = _VERSION_RE.match(version.strip())
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def suffix(version: str) -> str:
    """Map a tool version to its compatibility suffix.

    Unparseable or uncatalogued versions fall back to the newest known
    suffix, so newer tool releases keep working without a table update.

    Args:
        version: Version string such as ``v3.1.2`` or ``v4.0.0-20200909``.

    Returns:
        Suffix code, e.g. ``"31"`` or ``"40"``. Never raises.
    """
    major_minor = parse_major_minor(version)
    if major_minor is None:
        logger.warning(f"Cannot parse version {version!r}, using newest suffix")
        return newest_suffix()

    for breakpoint_, code in VERSION_SUFFIXES:
        if breakpoint_ == major_minor:
            logger.debug(f"Suffix for {version} is {code}")
            return code

    code = newest_suffix()
    logger.debug(f"Version {version} not in suffix table, using {code}")
    return code
