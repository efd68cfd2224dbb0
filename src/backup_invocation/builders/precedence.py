"""Override-beats-default selection shared by filter and option resolution."""

from collections.abc import Sequence


def first_non_empty(
    higher: Sequence[str] | None,
    lower: Sequence[str] | None,
    default: Sequence[str],
) -> list[str]:
    """Pick the first non-empty level: *higher*, then *lower*, then *default*.

    Levels are never merged. Empty strings are dropped before a level is
    judged, so ``[""]`` counts as empty and no blank token is returned.
    The result is always a new list.

    Examples:
        >>> first_non_empty(["a.*"], ["b.*"], ["*.*"])
        ['a.*']
        >>> first_non_empty([], None, ["*.*"])
        ['*.*']
    """
    for level in (higher, lower, default):
        values = [value for value in (level or ()) if value]
        if values:
            return values
    return []


def filter_args(patterns: Sequence[str]) -> list[str]:
    """Expand table-filter patterns into ``--filter <pattern>`` pairs."""
    args: list[str] = []
    for pattern in patterns:
        if pattern:
            args.extend(["--filter", pattern])
    return args
