"""Comment popularity scoring.

score = max(0, likes - dislikes) + recency_factor + reply_boost

The net-score term is floored at zero so a heavily disliked comment can
never outrank a neutral one through recency or reply volume alone.
"""

from datetime import datetime

from commentary.domain.model import Comment

# (max age in hours, points), upper bounds inclusive
RECENCY_BUCKETS: tuple[tuple[float, int], ...] = (
    (1, 10),
    (6, 8),
    (24, 6),
    (168, 4),  # 7 days
    (672, 2),  # 4 weeks
)

REPLY_BOOST_PER_REPLY = 0.5
MAX_REPLY_BOOST = 5.0


def calculate_net_score(comment: Comment) -> int:
    """Likes minus dislikes. May be negative."""
    return comment.likes - comment.dislikes


def calculate_recency_factor(created_at: datetime, now: datetime) -> int:
    """Time-decay bonus for a comment created at `created_at`.

    Args:
        created_at: Comment creation instant
        now: Evaluation instant

    Returns:
        10 within the first hour, stepping down to 0 after four weeks
    """
    hours_since_created = (now - created_at).total_seconds() / 3600
    for max_hours, points in RECENCY_BUCKETS:
        if hours_since_created <= max_hours:
            return points
    return 0


def calculate_reply_boost(reply_count: int) -> float:
    """Engagement bonus from direct replies, capped."""
    return min(reply_count * REPLY_BOOST_PER_REPLY, MAX_REPLY_BOOST)


def calculate_score(comment: Comment, now: datetime) -> float:
    """Combined ranking score for one comment at instant `now`."""
    net_score = calculate_net_score(comment)
    recency_factor = calculate_recency_factor(comment.created_at, now)
    reply_boost = calculate_reply_boost(comment.reply_count)
    return max(0, net_score) + recency_factor + reply_boost
