"""Comment domain service."""

import logfire
from datetime import datetime, timezone
from uuid import uuid4

from commentary.config import CommentSettings
from commentary.domain.error import (
    CommentNotFoundError,
    InvalidCommentError,
    InvalidReplyError,
)
from commentary.domain.model.comment import Comment
from commentary.domain.repository import CommentRepository
from commentary.domain.value import (
    CommentId,
    ReactionAction,
    ReactionType,
    UserId,
    VideoId,
)


class CommentService:
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings | None = None,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_settings: Comment settings (defaults if omitted)
        """
        self.comment_repository = comment_repository
        self.comment_settings = comment_settings or CommentSettings()

    async def create_comment(
        self,
        video_id: VideoId,
        user_id: UserId,
        content: str,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a video or a reply to a top-level comment.

        Args:
            video_id: Video ID
            user_id: Author user ID
            content: Comment text
            parent_comment_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            InvalidCommentError: If content is empty or too long
            CommentNotFoundError: If the parent comment does not exist
            InvalidReplyError: If the parent is on another video or is itself a reply
        """
        with logfire.span(
            "comment_service.create_comment",
            video_id=video_id,
            user_id=user_id,
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            if not content.strip():
                raise InvalidCommentError("Comment content must not be empty")
            if len(content) > self.comment_settings.max_content_length:
                raise InvalidCommentError(
                    f"Comment content must be at most "
                    f"{self.comment_settings.max_content_length} characters"
                )

            if parent_comment_id:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_comment_id=str(parent_comment_id),
                        video_id=video_id,
                    )
                    raise CommentNotFoundError(parent_comment_id)
                if parent.video_id != video_id:
                    logfire.error(
                        "Parent comment does not belong to video",
                        parent_comment_id=str(parent_comment_id),
                        parent_video_id=parent.video_id,
                        target_video_id=video_id,
                    )
                    raise InvalidReplyError(
                        parent_comment_id, "Parent comment does not belong to this video"
                    )
                if parent.is_reply:
                    logfire.warn(
                        "Reply to a reply rejected",
                        parent_comment_id=str(parent_comment_id),
                    )
                    raise InvalidReplyError(parent_comment_id, "Cannot reply to a reply")

            comment = Comment(
                id=CommentId(uuid4()),
                video_id=video_id,
                user_id=user_id,
                content=content,
                likes=0,
                dislikes=0,
                reply_count=0,
                parent_comment_id=parent_comment_id,
                created_at=datetime.now(timezone.utc),
            )

            saved = await self.comment_repository.save(comment)
            if parent_comment_id:
                await self.comment_repository.increment_counter(
                    parent_comment_id, "reply_count"
                )

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                video_id=video_id,
                is_reply=saved.is_reply,
            )
            return saved

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment and update its parent's reply count.

        Args:
            comment_id: Comment ID

        Raises:
            CommentNotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
                raise CommentNotFoundError(comment_id)

            if comment.parent_comment_id:
                parent = await self.comment_repository.find_by_id(
                    comment.parent_comment_id
                )
                if parent:
                    await self.comment_repository.decrement_counter(
                        parent.id, "reply_count"
                    )

            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                video_id=comment.video_id,
            )

    async def get_comments_for_video(self, video_id: VideoId) -> list[Comment]:
        """Get all comments and replies for a video.

        Args:
            video_id: Video ID

        Returns:
            List of comments
        """
        with logfire.span(
            "comment_service.get_comments_for_video", video_id=video_id
        ):
            comments = await self.comment_repository.find_by_video(video_id)
            logfire.info(
                "Comments retrieved for video",
                video_id=video_id,
                count=len(comments),
            )
            return comments

    async def get_replies(self, parent_comment_id: CommentId) -> list[Comment]:
        """Get direct replies to a comment.

        Args:
            parent_comment_id: Parent comment ID

        Returns:
            List of replies
        """
        with logfire.span(
            "comment_service.get_replies",
            parent_comment_id=str(parent_comment_id),
        ):
            replies = await self.comment_repository.find_children(parent_comment_id)
            logfire.info(
                "Replies retrieved",
                parent_comment_id=str(parent_comment_id),
                count=len(replies),
            )
            return replies

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def react(
        self,
        comment_id: CommentId,
        reaction: ReactionType,
        action: ReactionAction,
    ) -> Comment:
        """Increase or decrease a comment's likes or dislikes.

        Decreasing a counter that is already 0 leaves it at 0.

        Args:
            comment_id: Comment ID
            reaction: Which counter to change
            action: Increase or decrease

        Returns:
            Updated comment

        Raises:
            CommentNotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.react",
            comment_id=str(comment_id),
            reaction=reaction.value,
            action=action.value,
        ):
            if action == ReactionAction.INCREASE:
                updated = await self.comment_repository.increment_counter(
                    comment_id, reaction.value
                )
            else:
                updated = await self.comment_repository.decrement_counter(
                    comment_id, reaction.value
                )

            logfire.info(
                "Comment reaction updated",
                comment_id=str(comment_id),
                likes=updated.likes,
                dislikes=updated.dislikes,
            )
            return updated
