"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from commentary.domain.model import Comment
from commentary.domain.value import CommentId, UserId, VideoId

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

# Fixed evaluation instant for deterministic ranking tests
NOW = datetime(2026, 10, 17, 12, 0, 0, tzinfo=timezone.utc)


def make_comment(
    likes: int = 0,
    dislikes: int = 0,
    reply_count: int = 0,
    age: timedelta = timedelta(minutes=5),
    parent: Comment | None = None,
    video_id: str = "video_123",
    content: str = "Nice video",
    now: datetime = NOW,
) -> Comment:
    """Helper function to build comments for tests.

    Args:
        likes: Like count
        dislikes: Dislike count
        reply_count: Direct reply count
        age: How long before `now` the comment was created
        parent: Parent comment for replies
        video_id: Video the comment belongs to
        content: Comment text
        now: Reference instant for `age`

    Returns:
        Comment entity
    """
    return Comment(
        id=CommentId(uuid4()),
        video_id=VideoId(video_id),
        user_id=UserId(f"user_{uuid4().hex[:8]}"),
        content=content,
        likes=likes,
        dislikes=dislikes,
        reply_count=reply_count,
        parent_comment_id=parent.id if parent else None,
        created_at=now - age,
    )
