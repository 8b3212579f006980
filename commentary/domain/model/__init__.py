"""Domain model entities for video comments."""

from commentary.domain.model.comment import Comment, RankedComment

__all__ = [
    "Comment",
    "RankedComment",
]
