"""React to comment use case (like/dislike counters)."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase, CamelModel
from commentary.domain.service import CommentService
from commentary.domain.value import CommentId, ReactionAction, ReactionType


class ReactToCommentRequest(BaseModel):
    """React to comment request."""

    comment_id: str  # UUID string
    reaction: ReactionType
    action: ReactionAction


class ReactToCommentResponse(CamelModel):
    """React to comment response."""

    comment_id: str
    likes: int
    dislikes: int
    message: str


class ReactToCommentUseCase(BaseUseCase):
    """Use case for increasing or decreasing a comment's likes or dislikes."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize react to comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ReactToCommentRequest) -> ReactToCommentResponse:
        """Execute reaction flow.

        Args:
            request: Comment ID, counter and direction

        Returns:
            Updated counters

        Raises:
            ValueError: If the comment ID is not a UUID
            CommentNotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.react(
            comment_id=CommentId(UUID(request.comment_id)),
            reaction=request.reaction,
            action=request.action,
        )

        noun = "Likes" if request.reaction == ReactionType.LIKE else "Dislikes"
        verb = "increased" if request.action == ReactionAction.INCREASE else "decreased"
        return ReactToCommentResponse(
            comment_id=request.comment_id,
            likes=comment.likes,
            dislikes=comment.dislikes,
            message=f"{noun} {verb} successfully",
        )
