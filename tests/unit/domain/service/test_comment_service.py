"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from commentary.config import CommentSettings
from commentary.domain.error import (
    CommentNotFoundError,
    InvalidCommentError,
    InvalidReplyError,
)
from commentary.domain.repository import CommentRepository
from commentary.domain.service import CommentService
from commentary.domain.value import (
    CommentId,
    ReactionAction,
    ReactionType,
    UserId,
    VideoId,
)
from commentary.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - fresh in-memory store per test
unit_env = create_env_fixture()

VIDEO = VideoId("video_123")
AUTHOR = UserId("user_1")


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comment starts with zero counters and no parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        result = await comment_service.create_comment(
            video_id=VIDEO, user_id=AUTHOR, content="First!"
        )

        # Assert
        assert result.video_id == VIDEO
        assert result.user_id == AUTHOR
        assert result.content == "First!"
        assert result.likes == 0
        assert result.dislikes == 0
        assert result.reply_count == 0
        assert result.parent_comment_id is None
        assert result.created_at.tzinfo is not None

        # Verify it was saved in repository
        saved = await comment_repo.find_by_id(result.id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_create_reply_increments_parent_reply_count(self, unit_env):
        """Replying bumps the parent's reply count by one."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_service.create_comment(
            video_id=VIDEO, user_id=AUTHOR, content="Parent"
        )

        # Act
        reply = await comment_service.create_comment(
            video_id=VIDEO,
            user_id=UserId("user_2"),
            content="Reply",
            parent_comment_id=parent.id,
        )

        # Assert
        assert reply.parent_comment_id == parent.id
        updated_parent = await comment_repo.find_by_id(parent.id)
        assert updated_parent.reply_count == 1

    @pytest.mark.asyncio
    async def test_create_reply_with_missing_parent_fails(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(CommentNotFoundError):
            await comment_service.create_comment(
                video_id=VIDEO,
                user_id=AUTHOR,
                content="Reply",
                parent_comment_id=CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_create_reply_on_other_video_fails(self, unit_env):
        """Parent must belong to the same video."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create_comment(
            video_id=VideoId("video_other"), user_id=AUTHOR, content="Parent"
        )

        # Act & Assert
        with pytest.raises(InvalidReplyError, match="does not belong"):
            await comment_service.create_comment(
                video_id=VIDEO,
                user_id=AUTHOR,
                content="Reply",
                parent_comment_id=parent.id,
            )

    @pytest.mark.asyncio
    async def test_reply_to_reply_is_rejected(self, unit_env):
        """Threads are two levels deep."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_service.create_comment(
            video_id=VIDEO, user_id=AUTHOR, content="Parent"
        )
        reply = await comment_service.create_comment(
            video_id=VIDEO, user_id=AUTHOR, content="Reply", parent_comment_id=parent.id
        )

        # Act & Assert
        with pytest.raises(InvalidReplyError, match="Cannot reply to a reply"):
            await comment_service.create_comment(
                video_id=VIDEO,
                user_id=AUTHOR,
                content="Nested",
                parent_comment_id=reply.id,
            )

        unchanged = await comment_repo.find_by_id(reply.id)
        assert unchanged.reply_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "x" * 10001])
    async def test_invalid_content_is_rejected(self, unit_env, content):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(InvalidCommentError):
            await comment_service.create_comment(
                video_id=VIDEO, user_id=AUTHOR, content=content
            )

    @pytest.mark.asyncio
    async def test_content_length_follows_configured_maximum(self):
        """A raised max_content_length admits longer comments."""
        # Arrange
        comment_service = CommentService(
            InMemoryCommentRepository(), CommentSettings(max_content_length=20000)
        )

        # Act
        result = await comment_service.create_comment(
            video_id=VIDEO, user_id=AUTHOR, content="x" * 15000
        )

        # Assert
        assert len(result.content) == 15000
        with pytest.raises(InvalidCommentError):
            await comment_service.create_comment(
                video_id=VIDEO, user_id=AUTHOR, content="x" * 20001
            )


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_delete_comment(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            video_id=VIDEO, user_id=AUTHOR, content="Bye"
        )

        # Act
        await comment_service.delete_comment(comment.id)

        # Assert
        assert await comment_service.get_comment_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_delete_reply_decrements_parent_reply_count(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create_comment(
            video_id=VIDEO, user_id=AUTHOR, content="Parent"
        )
        reply = await comment_service.create_comment(
            video_id=VIDEO, user_id=AUTHOR, content="Reply", parent_comment_id=parent.id
        )

        # Act
        await comment_service.delete_comment(reply.id)

        # Assert
        updated_parent = await comment_service.get_comment_by_id(parent.id)
        assert updated_parent.reply_count == 0

    @pytest.mark.asyncio
    async def test_delete_missing_comment_fails(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(CommentNotFoundError):
            await comment_service.delete_comment(CommentId(uuid4()))


class TestQueries:
    """Tests for comment lookups."""

    @pytest.mark.asyncio
    async def test_get_comments_for_video_includes_replies(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = make_comment(video_id=VIDEO)
        reply = make_comment(video_id=VIDEO, parent=parent)
        other = make_comment(video_id="video_other")
        for comment in (parent, reply, other):
            await comment_repo.save(comment)

        # Act
        comments = await comment_service.get_comments_for_video(VIDEO)

        # Assert
        assert {c.id for c in comments} == {parent.id, reply.id}

    @pytest.mark.asyncio
    async def test_get_replies(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = make_comment()
        replies = [make_comment(parent=parent) for _ in range(3)]
        for comment in (parent, *replies, make_comment()):
            await comment_repo.save(comment)

        # Act
        result = await comment_service.get_replies(parent.id)

        # Assert
        assert [c.id for c in result] == [r.id for r in replies]

    @pytest.mark.asyncio
    async def test_get_comment_by_id_missing_returns_none(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.get_comment_by_id(CommentId(uuid4())) is None


class TestReact:
    """Tests for react method."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "reaction, action, expected_likes, expected_dislikes",
        [
            (ReactionType.LIKE, ReactionAction.INCREASE, 3, 1),
            (ReactionType.LIKE, ReactionAction.DECREASE, 1, 1),
            (ReactionType.DISLIKE, ReactionAction.INCREASE, 2, 2),
            (ReactionType.DISLIKE, ReactionAction.DECREASE, 2, 0),
        ],
    )
    async def test_react_changes_one_counter(
        self, unit_env, reaction, action, expected_likes, expected_dislikes
    ):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(likes=2, dislikes=1)
        await comment_repo.save(comment)

        # Act
        updated = await comment_service.react(comment.id, reaction, action)

        # Assert
        assert updated.likes == expected_likes
        assert updated.dislikes == expected_dislikes

    @pytest.mark.asyncio
    async def test_decrease_at_zero_stays_zero(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(likes=0)
        await comment_repo.save(comment)

        updated = await comment_service.react(
            comment.id, ReactionType.LIKE, ReactionAction.DECREASE
        )

        assert updated.likes == 0

    @pytest.mark.asyncio
    async def test_react_on_missing_comment_fails(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(CommentNotFoundError):
            await comment_service.react(
                CommentId(uuid4()), ReactionType.LIKE, ReactionAction.INCREASE
            )
