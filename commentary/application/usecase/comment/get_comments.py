"""Get comments use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase, CamelModel
from commentary.config import CommentSettings
from commentary.domain.model import RankedComment
from commentary.domain.ranking import normalize_limit
from commentary.domain.service import CommentService, RankingService
from commentary.domain.value import CommentListType, VideoId


class RankedCommentItem(CamelModel):
    """Ranked comment in response.

    `replies` is only present on threaded listings.
    """

    id: str
    video_id: str
    user_id: str
    content: str
    likes: int
    dislikes: int
    reply_count: int
    parent_comment_id: str | None
    created_at: datetime
    net_score: int
    score: float
    time_ago: str
    replies: list["RankedCommentItem"] | None = None

    @classmethod
    def from_domain(cls, comment: RankedComment) -> "RankedCommentItem":
        """Convert a domain RankedComment to a response item.

        Args:
            comment: Ranked comment, possibly with replies

        Returns:
            Response item with replies recursively converted
        """
        return cls(
            id=str(comment.id),
            video_id=comment.video_id,
            user_id=comment.user_id,
            content=comment.content,
            likes=comment.likes,
            dislikes=comment.dislikes,
            reply_count=comment.reply_count,
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            created_at=comment.created_at,
            net_score=comment.net_score,
            score=comment.score,
            time_ago=comment.time_ago,
            replies=(
                [cls.from_domain(reply) for reply in comment.replies]
                if comment.replies is not None
                else None
            ),
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    video_id: str
    list_type: CommentListType = CommentListType.ALL
    top_level_limit: int | str | None = None  # Raw limit, normalized by the use case
    replies_limit: int | str | None = None


class GetCommentsResponse(CamelModel):
    """Get comments response."""

    video_id: str
    comments: list[RankedCommentItem]
    count: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing a video's comments ranked by score.

    Three listing shapes:
    - all: every comment (replies included) ranked flat
    - top: top-level comments only, ranked and limited
    - nested: ranked top-level comments, each with its newest replies
    """

    def __init__(
        self,
        comment_service: CommentService,
        ranking_service: RankingService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            ranking_service: Ranking domain service
            comment_settings: Default listing limits
        """
        self.comment_service = comment_service
        self.ranking_service = ranking_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Video ID, listing type and optional limits

        Returns:
            Ranked comments for the video
        """
        with logfire.span(
            "get_comments.execute",
            video_id=request.video_id,
            list_type=request.list_type.value,
        ):
            comments = await self.comment_service.get_comments_for_video(
                VideoId(request.video_id)
            )

            top_level_limit = (
                normalize_limit(request.top_level_limit)
                or self.comment_settings.default_top_level_limit
            )
            replies_limit = (
                normalize_limit(request.replies_limit)
                or self.comment_settings.default_replies_limit
            )

            if request.list_type == CommentListType.TOP:
                top_level = [c for c in comments if not c.is_reply]
                ranked = self.ranking_service.top(top_level, top_level_limit)
            elif request.list_type == CommentListType.NESTED:
                ranked = self.ranking_service.thread(
                    comments,
                    top_level_limit=top_level_limit,
                    replies_limit=replies_limit,
                )
            else:
                ranked = self.ranking_service.rank(comments)

            items = [RankedCommentItem.from_domain(comment) for comment in ranked]
            logfire.info("Comments listed", video_id=request.video_id, count=len(items))

            return GetCommentsResponse(
                video_id=request.video_id,
                comments=items,
                count=len(items),
            )
