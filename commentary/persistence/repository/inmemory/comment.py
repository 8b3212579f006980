"""In-memory comment repository."""

from typing import Optional

from commentary.domain.error import CommentNotFoundError
from commentary.domain.model.comment import Comment
from commentary.domain.repository.comment import CommentRepository, CounterField
from commentary.domain.value import CommentId, VideoId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository.

    Counter updates are read-then-write and not synchronized.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_video(self, video_id: VideoId) -> list[Comment]:
        """Find all comments for a video."""
        return [c for c in self._comments.values() if c.video_id == video_id]

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct children of a comment."""
        return [c for c in self._comments.values() if c.parent_comment_id == parent_id]

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def increment_counter(
        self, comment_id: CommentId, field: CounterField
    ) -> Comment:
        """Increment a counter by 1."""
        comment = self._get_or_raise(comment_id)
        updated = comment.model_copy(update={field: getattr(comment, field) + 1})
        self._comments[comment_id] = updated
        return updated

    async def decrement_counter(
        self, comment_id: CommentId, field: CounterField
    ) -> Comment:
        """Decrement a counter by 1 (minimum 0)."""
        comment = self._get_or_raise(comment_id)
        current = getattr(comment, field)
        if current <= 0:
            return comment
        updated = comment.model_copy(update={field: current - 1})
        self._comments[comment_id] = updated
        return updated

    def _get_or_raise(self, comment_id: CommentId) -> Comment:
        comment = self._comments.get(comment_id)
        if comment is None:
            raise CommentNotFoundError(comment_id)
        return comment
