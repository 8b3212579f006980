"""Comment ranking and threading.

Pure functions of a comment collection and an evaluation instant. Callers
that do not pass `now` get one sampled per call, so every comment in a
single ranking is scored against the same instant.
"""

from commentary.domain.ranking.formatter import format_time_ago
from commentary.domain.ranking.limits import apply_limit, normalize_limit
from commentary.domain.ranking.ranker import get_top_comments, rank_comments
from commentary.domain.ranking.scorer import (
    calculate_net_score,
    calculate_recency_factor,
    calculate_reply_boost,
    calculate_score,
)
from commentary.domain.ranking.threader import thread_comments

__all__ = [
    "apply_limit",
    "calculate_net_score",
    "calculate_recency_factor",
    "calculate_reply_boost",
    "calculate_score",
    "format_time_ago",
    "get_top_comments",
    "normalize_limit",
    "rank_comments",
    "thread_comments",
]
