"""Domain value objects for video comments."""

from commentary.domain.value.identifiers import CommentId, UserId, VideoId
from commentary.domain.value.types import (
    CommentListType,
    ReactionAction,
    ReactionType,
)

__all__ = [
    # Identifiers
    "CommentId",
    "VideoId",
    "UserId",
    # Types
    "CommentListType",
    "ReactionType",
    "ReactionAction",
]
