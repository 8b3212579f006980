"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase, CamelModel
from commentary.domain.service import CommentService
from commentary.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string


class DeleteCommentResponse(CamelModel):
    """Delete comment response."""

    comment_id: str
    message: str = "Comment deleted successfully"


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Replies to the deleted comment are left in place.

        Args:
            request: Delete comment request

        Returns:
            Confirmation

        Raises:
            ValueError: If the comment ID is not a UUID
            CommentNotFoundError: If the comment does not exist
        """
        await self.comment_service.delete_comment(CommentId(UUID(request.comment_id)))
        return DeleteCommentResponse(comment_id=request.comment_id)
