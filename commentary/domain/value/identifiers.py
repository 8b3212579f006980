"""Strongly typed identifiers for comment domain entities.

Comment IDs are UUIDs we mint ourselves. Video and user IDs come from the
surrounding platform and are treated as opaque strings.
"""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
VideoId = NewType("VideoId", str)
UserId = NewType("UserId", str)
