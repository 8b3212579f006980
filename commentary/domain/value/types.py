"""Domain value types for video comments."""

from enum import Enum


class CommentListType(str, Enum):
    """Shape of a comment listing for a video."""

    ALL = "all"  # Every comment, ranked flat
    TOP = "top"  # Top-level comments only, ranked
    NESTED = "nested"  # Ranked top-level comments with their replies


class ReactionType(str, Enum):
    """Counter a reaction applies to."""

    LIKE = "likes"
    DISLIKE = "dislikes"


class ReactionAction(str, Enum):
    """Direction of a counter change."""

    INCREASE = "increase"
    DECREASE = "decrease"
