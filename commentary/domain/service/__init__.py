"""Domain services."""

from .comment_service import CommentService
from .ranking_service import RankingService

__all__ = [
    "CommentService",
    "RankingService",
]
