"""Result limit handling.

A limit that is missing, non-numeric, zero or negative means "no limit".
The same rule applies to top-level and reply limits everywhere.
"""

from typing import Sequence, TypeVar

T = TypeVar("T")


def normalize_limit(limit: int | str | None) -> int | None:
    """Convert a raw limit into a positive int, or None for unlimited.

    Args:
        limit: Limit as given by the caller (query strings arrive as str)

    Returns:
        Positive limit, or None when the input does not describe one
    """
    if limit is None or isinstance(limit, bool):
        return None
    if isinstance(limit, str):
        try:
            limit = int(limit.strip())
        except ValueError:
            return None
    if not isinstance(limit, int) or limit <= 0:
        return None
    return limit


def apply_limit(items: Sequence[T], limit: int | str | None) -> list[T]:
    """Keep the first `limit` items, or all of them when unlimited."""
    normalized = normalize_limit(limit)
    if normalized is None:
        return list(items)
    return list(items[:normalized])
