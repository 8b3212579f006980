"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Literal, Optional

from commentary.domain.model.comment import Comment
from commentary.domain.value import CommentId, VideoId

CounterField = Literal["likes", "dislikes", "reply_count"]


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment storage operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_video(self, video_id: VideoId) -> List[Comment]:
        """Find all comments (top-level and replies) for a video.

        Args:
            video_id: The video ID

        Returns:
            List of comments in insertion order
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of child comments in insertion order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete).

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def increment_counter(
        self, comment_id: CommentId, field: CounterField
    ) -> Comment:
        """Increment a counter by 1.

        Args:
            comment_id: Comment ID
            field: Counter to change

        Returns:
            Updated comment

        Raises:
            CommentNotFoundError: If the comment does not exist
        """
        pass

    @abstractmethod
    async def decrement_counter(
        self, comment_id: CommentId, field: CounterField
    ) -> Comment:
        """Decrement a counter by 1 (minimum 0).

        Args:
            comment_id: Comment ID
            field: Counter to change

        Returns:
            Updated comment (unchanged if the counter was already 0)

        Raises:
            CommentNotFoundError: If the comment does not exist
        """
        pass
