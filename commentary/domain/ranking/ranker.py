"""Rank comments by score."""

from datetime import datetime, timezone
from typing import Iterable

from commentary.domain.model import Comment, RankedComment
from commentary.domain.ranking.formatter import format_time_ago
from commentary.domain.ranking.limits import apply_limit
from commentary.domain.ranking.scorer import calculate_net_score, calculate_score


def resolve_now(now: datetime | None) -> datetime:
    """Return `now` as an aware UTC instant, sampling the clock when None.

    Naive values are read as UTC, the same way Comment.created_at is.
    """
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def to_ranked(comment: Comment, now: datetime) -> RankedComment:
    """Attach net score, score and relative time to a comment."""
    return RankedComment(
        **comment.model_dump(include=set(Comment.model_fields)),
        net_score=calculate_net_score(comment),
        score=calculate_score(comment, now),
        time_ago=format_time_ago(comment.created_at, now),
    )


def rank_comments(
    comments: Iterable[Comment], now: datetime | None = None
) -> list[RankedComment]:
    """Score every comment and sort by score, highest first.

    The sort is stable, so comments with equal scores keep their input order.

    Args:
        comments: Comments to rank
        now: Evaluation instant (sampled once here when omitted)

    Returns:
        Ranked comments
    """
    now = resolve_now(now)

    ranked = [to_ranked(comment, now) for comment in comments]
    return sorted(ranked, key=lambda c: c.score, reverse=True)


def get_top_comments(
    comments: Iterable[Comment],
    limit: int | str | None,
    now: datetime | None = None,
) -> list[RankedComment]:
    """Return the `limit` highest scoring comments (all when unlimited)."""
    return apply_limit(rank_comments(comments, now), limit)
