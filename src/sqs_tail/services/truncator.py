"""In-place truncation of long string fields addressed by dotted paths."""

from typing import Any, Iterable


def format_truncated(value: str, limit: int) -> str:
    """Shorten a string to limit characters and note its original length."""
    return f"{value[:limit]}… ({len(value)} chars)"


def truncate_field(
    obj: dict[str, Any],
    field: str,
    remaining: list[str],
    limit: int,
) -> None:
    """
    Truncate the string at field (then remaining) inside obj.

    Missing fields end the descent silently. A string longer than limit is
    shortened even when more segments remain after it.

    Args:
        obj: Object to mutate.
        field: Key to look up at this level.
        remaining: Path segments below field.
        limit: Maximum characters kept.
    """
    if field not in obj:
        return

    value = obj[field]
    if isinstance(value, dict) and remaining:
        truncate_field(value, remaining[0], remaining[1:], limit)
    if isinstance(value, str) and len(value) > limit:
        obj[field] = format_truncated(value, limit)


def truncate(value: Any, paths: Iterable[str], limit: int) -> None:
    """
    Truncate every dotted path in value, mutating it in place.

    Args:
        value: Parsed JSON value. Only objects are descended into.
        paths: Dotted field paths, e.g. ``details.event``.
        limit: Maximum characters kept for each matched string.
    """
    if not isinstance(value, dict):
        return

    for path in paths:
        field, *remaining = path.split(".")
        truncate_field(value, field, remaining, limit)
