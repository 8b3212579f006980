"""Comment entities.

A comment is attached to a video either directly (top-level) or as a reply
to a top-level comment. Threads are two levels deep.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from commentary.domain.value import CommentId, UserId, VideoId


class Comment(BaseModel):
    """Comment entity.

    Counters are maintained by the comment store; ranking only reads them.

    Threading is managed through:
    - parent_comment_id: Direct parent comment (None for top-level)
    - reply_count: Number of direct replies
    """

    model_config = ConfigDict(frozen=True)

    id: CommentId
    video_id: VideoId
    user_id: UserId
    # Upper bound is CommentSettings.max_content_length, checked by CommentService
    content: str = Field(min_length=1)
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    parent_comment_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("created_at")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Interpret naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def is_reply(self) -> bool:
        return self.parent_comment_id is not None


class RankedComment(Comment):
    """Comment with its derived ranking fields.

    Never persisted: score and time_ago depend on the instant they were
    computed at. `replies` is only set on threaded output.
    """

    net_score: int
    score: float = Field(ge=0)
    time_ago: str
    replies: Optional[list["RankedComment"]] = None
