"""Comment domain errors.

The API layer maps these to HTTP statuses:
CommentNotFoundError -> 404, InvalidCommentError and InvalidReplyError -> 400.
"""

from uuid import UUID


class CommentError(Exception):
    """Base class for comment domain errors."""


class InvalidCommentError(CommentError):
    """Comment content is empty or too long."""


class InvalidReplyError(CommentError):
    """A reply targets a parent it may not be attached to."""

    def __init__(self, parent_comment_id: UUID, reason: str):
        self.parent_comment_id = parent_comment_id
        self.reason = reason
        super().__init__(reason)


class CommentNotFoundError(CommentError):
    """No comment exists with the given ID."""

    def __init__(self, comment_id: UUID):
        self.comment_id = comment_id
        super().__init__(f"Comment not found: {comment_id}")
