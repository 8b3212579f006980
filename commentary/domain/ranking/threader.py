"""Two-level comment threading.

Top-level comments are ranked by score. Each parent's direct replies are
scored too but shown newest first, so a conversation reads in order.
"""

from collections import defaultdict
from datetime import datetime
from typing import Iterable

from commentary.domain.model import Comment, RankedComment
from commentary.domain.ranking.limits import apply_limit
from commentary.domain.ranking.ranker import rank_comments, resolve_now, to_ranked
from commentary.domain.value import CommentId


def thread_comments(
    comments: Iterable[Comment],
    top_level_limit: int | str | None = None,
    replies_limit: int | str | None = None,
    now: datetime | None = None,
) -> list[RankedComment]:
    """Rank top-level comments and attach their replies.

    Args:
        comments: Flat collection of top-level comments and replies
        top_level_limit: Maximum number of top-level comments (None = all)
        replies_limit: Maximum number of replies per parent (None = all)
        now: Evaluation instant (sampled once here when omitted)

    Returns:
        Ranked top-level comments, each carrying its replies
    """
    now = resolve_now(now)

    top_level: list[Comment] = []
    replies_by_parent: dict[CommentId, list[Comment]] = defaultdict(list)
    for comment in comments:
        if comment.parent_comment_id is None:
            top_level.append(comment)
        else:
            replies_by_parent[comment.parent_comment_id].append(comment)

    ranked_top = apply_limit(rank_comments(top_level, now), top_level_limit)

    threaded = []
    for parent in ranked_top:
        replies = [to_ranked(reply, now) for reply in replies_by_parent.get(parent.id, [])]
        replies.sort(key=lambda r: r.created_at, reverse=True)
        threaded.append(
            parent.model_copy(update={"replies": apply_limit(replies, replies_limit)})
        )

    return threaded
