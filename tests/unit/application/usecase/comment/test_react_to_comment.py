"""Unit tests for ReactToCommentUseCase."""

from uuid import uuid4

import pytest

from commentary.application.usecase.comment import (
    ReactToCommentRequest,
    ReactToCommentUseCase,
)
from commentary.domain.error import CommentNotFoundError
from commentary.domain.repository import CommentRepository
from commentary.domain.value import ReactionAction, ReactionType
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReactToCommentUseCase:
    """Tests for ReactToCommentUseCase."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "reaction, action, message",
        [
            (ReactionType.LIKE, ReactionAction.INCREASE, "Likes increased successfully"),
            (ReactionType.LIKE, ReactionAction.DECREASE, "Likes decreased successfully"),
            (
                ReactionType.DISLIKE,
                ReactionAction.INCREASE,
                "Dislikes increased successfully",
            ),
            (
                ReactionType.DISLIKE,
                ReactionAction.DECREASE,
                "Dislikes decreased successfully",
            ),
        ],
    )
    async def test_reaction_messages(self, unit_env, reaction, action, message):
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(ReactToCommentUseCase)
        comment = make_comment(likes=1, dislikes=1)
        await comment_repo.save(comment)

        # Act
        response = await use_case.execute(
            ReactToCommentRequest(
                comment_id=str(comment.id), reaction=reaction, action=action
            )
        )

        # Assert
        assert response.comment_id == str(comment.id)
        assert response.message == message

    @pytest.mark.asyncio
    async def test_increase_like_updates_counters(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(ReactToCommentUseCase)
        comment = make_comment(likes=4, dislikes=2)
        await comment_repo.save(comment)

        response = await use_case.execute(
            ReactToCommentRequest(
                comment_id=str(comment.id),
                reaction=ReactionType.LIKE,
                action=ReactionAction.INCREASE,
            )
        )

        assert response.likes == 5
        assert response.dislikes == 2

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        use_case = await unit_env.get(ReactToCommentUseCase)

        with pytest.raises(CommentNotFoundError):
            await use_case.execute(
                ReactToCommentRequest(
                    comment_id=str(uuid4()),
                    reaction=ReactionType.DISLIKE,
                    action=ReactionAction.INCREASE,
                )
            )
