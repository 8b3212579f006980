"""Relative timestamp labels ("3 hours ago")."""

import math
from datetime import datetime

# Fixed-length units, largest first. Not calendar aware.
TIME_UNITS: tuple[tuple[str, int], ...] = (
    ("year", 31_536_000),
    ("month", 2_592_000),
    ("week", 604_800),
    ("day", 86_400),
    ("hour", 3_600),
    ("minute", 60),
)


def format_time_ago(created_at: datetime, now: datetime) -> str:
    """Format the time elapsed since `created_at` as a coarse English label.

    Uses the largest unit with a count of at least one. Anything under a
    minute, including timestamps in the future, is "just now".
    """
    seconds_ago = math.floor((now - created_at).total_seconds())

    for label, unit_seconds in TIME_UNITS:
        count = seconds_ago // unit_seconds
        if count >= 1:
            suffix = "s" if count > 1 else ""
            return f"{count} {label}{suffix} ago"

    return "just now"
