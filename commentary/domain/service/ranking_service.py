"""Ranking domain service."""

from collections.abc import Callable, Sequence
from datetime import datetime, timezone

import logfire

from commentary.domain.model import Comment, RankedComment
from commentary.domain.ranking import (
    get_top_comments,
    normalize_limit,
    rank_comments,
    thread_comments,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RankingService:
    """Domain service for ranking and threading comment collections.

    Holds no state besides the clock. Each call samples the clock once, so
    all comments in one result are scored against the same instant.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        """Initialize ranking service.

        Args:
            clock: Returns the current instant (timezone-aware)
        """
        self.clock = clock

    def rank(self, comments: Sequence[Comment]) -> list[RankedComment]:
        """Rank comments by score, highest first.

        Args:
            comments: Comments to rank

        Returns:
            Ranked comments
        """
        with logfire.span("ranking_service.rank", count=len(comments)):
            ranked = rank_comments(comments, now=self.clock())
            logfire.debug("Comments ranked", count=len(ranked))
            return ranked

    def top(
        self, comments: Sequence[Comment], limit: int | str | None
    ) -> list[RankedComment]:
        """Return the highest scoring comments.

        Args:
            comments: Comments to rank
            limit: Maximum number of comments (missing or invalid = all)

        Returns:
            Top ranked comments
        """
        with logfire.span(
            "ranking_service.top", count=len(comments), limit=normalize_limit(limit)
        ):
            top = get_top_comments(comments, limit, now=self.clock())
            logfire.debug("Top comments selected", count=len(top))
            return top

    def thread(
        self,
        comments: Sequence[Comment],
        top_level_limit: int | str | None = None,
        replies_limit: int | str | None = None,
    ) -> list[RankedComment]:
        """Rank top-level comments and attach their newest replies.

        Args:
            comments: Flat collection of top-level comments and replies
            top_level_limit: Maximum number of top-level comments (missing or invalid = all)
            replies_limit: Maximum number of replies per comment (missing or invalid = all)

        Returns:
            Ranked top-level comments with replies attached
        """
        with logfire.span(
            "ranking_service.thread",
            count=len(comments),
            top_level_limit=normalize_limit(top_level_limit),
            replies_limit=normalize_limit(replies_limit),
        ):
            threaded = thread_comments(
                comments,
                top_level_limit=top_level_limit,
                replies_limit=replies_limit,
                now=self.clock(),
            )
            logfire.debug(
                "Comments threaded",
                top_level=len(threaded),
                replies=sum(len(c.replies or []) for c in threaded),
            )
            return threaded
