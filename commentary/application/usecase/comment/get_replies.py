"""Get replies use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase, CamelModel
from commentary.application.usecase.comment.get_comments import RankedCommentItem
from commentary.config import CommentSettings
from commentary.domain.ranking import normalize_limit
from commentary.domain.service import CommentService, RankingService
from commentary.domain.value import CommentId


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str  # UUID string
    limit: int | str | None = None


class GetRepliesResponse(CamelModel):
    """Get replies response."""

    comment_id: str
    replies: list[RankedCommentItem]
    count: int


class GetRepliesUseCase(BaseUseCase):
    """Use case for listing the replies to one comment, ranked by score."""

    def __init__(
        self,
        comment_service: CommentService,
        ranking_service: RankingService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get replies use case.

        Args:
            comment_service: Comment domain service
            ranking_service: Ranking domain service
            comment_settings: Default listing limits
        """
        self.comment_service = comment_service
        self.ranking_service = ranking_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow.

        An unknown comment simply has no replies.

        Args:
            request: Parent comment ID and optional limit

        Returns:
            Replies ranked by score

        Raises:
            ValueError: If the comment ID is not a UUID
        """
        comment_id = CommentId(UUID(request.comment_id))
        replies = await self.comment_service.get_replies(comment_id)

        limit = (
            normalize_limit(request.limit)
            or self.comment_settings.default_replies_limit
        )
        ranked = self.ranking_service.top(replies, limit)

        items = [RankedCommentItem.from_domain(reply) for reply in ranked]
        return GetRepliesResponse(
            comment_id=request.comment_id,
            replies=items,
            count=len(items),
        )
