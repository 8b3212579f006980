"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from commentary.application.usecase.base import BaseUseCase, CamelModel
from commentary.domain.service import CommentService
from commentary.domain.value import CommentId, UserId, VideoId


class CreateCommentRequest(CamelModel):
    """Create comment request."""

    video_id: str
    user_id: str
    content: str
    parent_comment_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(CamelModel):
    """Create comment response."""

    id: str
    video_id: str
    user_id: str
    content: str
    likes: int
    dislikes: int
    reply_count: int
    parent_comment_id: str | None
    created_at: datetime


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a video or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        The comment service validates the parent and bumps its reply count.

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            ValueError: If the parent comment ID is not a UUID
            CommentNotFoundError: If the parent comment does not exist
            InvalidReplyError: If the parent cannot be replied to
            InvalidCommentError: If the content is invalid
        """
        parent_comment_id = (
            CommentId(UUID(request.parent_comment_id))
            if request.parent_comment_id
            else None
        )
        comment = await self.comment_service.create_comment(
            video_id=VideoId(request.video_id),
            user_id=UserId(request.user_id),
            content=request.content,
            parent_comment_id=parent_comment_id,
        )

        return CreateCommentResponse(
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
        )
