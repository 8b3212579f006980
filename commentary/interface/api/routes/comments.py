"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from commentary.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    ReactToCommentRequest,
    ReactToCommentResponse,
    ReactToCommentUseCase,
)
from commentary.domain.error import (
    CommentNotFoundError,
    InvalidCommentError,
    InvalidReplyError,
)
from commentary.domain.value import CommentListType, ReactionAction, ReactionType

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


@router.get(
    "/{video_id}",
    response_model=GetCommentsResponse,
    response_model_exclude_none=True,
)
async def get_comments(
    video_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    list_type: str | None = Query(default=None, alias="type"),
    top_level_limit: str | None = Query(default=None, alias="topLevelLimit"),
    replies_limit: str | None = Query(default=None, alias="repliesLimit"),
) -> GetCommentsResponse:
    """Get ranked comments for a video.

    Example: /api/comments/video_123?type=nested&topLevelLimit=1&repliesLimit=3

    Args:
        video_id: Video ID
        get_comments_use_case: Get comments use case from DI
        list_type: "top", "nested", or anything else for all comments ranked flat
        top_level_limit: Maximum number of top-level comments (missing or invalid = all)
        replies_limit: Maximum number of replies per comment (missing or invalid = all)

    Returns:
        Ranked comments
    """
    try:
        parsed_type = CommentListType(list_type) if list_type else CommentListType.ALL
    except ValueError:
        parsed_type = CommentListType.ALL

    request = GetCommentsRequest(
        video_id=video_id,
        list_type=parsed_type,
        top_level_limit=top_level_limit,
        replies_limit=replies_limit,
    )
    return await get_comments_use_case.execute(request)


@router.get(
    "/{comment_id}/replies",
    response_model=GetRepliesResponse,
    response_model_exclude_none=True,
)
async def get_replies(
    comment_id: str,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    limit: str | None = None,
) -> GetRepliesResponse:
    """Get replies to a comment, ranked by score.

    Args:
        comment_id: Parent comment UUID
        get_replies_use_case: Get replies use case from DI
        limit: Maximum number of replies (missing or invalid = all)

    Returns:
        Ranked replies

    Raises:
        HTTPException: If the comment ID is malformed
    """
    try:
        request = GetRepliesRequest(comment_id=comment_id, limit=limit)
        return await get_replies_use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "",
    response_model=CreateCommentResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Create a comment on a video or reply to a top-level comment.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment

    Raises:
        HTTPException: If the parent is missing or the request is invalid
    """
    try:
        return await create_comment_use_case.execute(request)
    except CommentNotFoundError as e:
        logfire.warn("Comment creation failed - parent not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (InvalidReplyError, InvalidCommentError, ValueError) as e:
        logfire.warn("Comment creation rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error(
            "Unexpected error creating comment", error=str(e), _exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Delete a comment.

    Args:
        comment_id: Comment UUID
        delete_comment_use_case: Delete comment use case from DI

    Returns:
        Confirmation

    Raises:
        HTTPException: If the comment is missing or the ID is malformed
    """
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id)
        )
    except CommentNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


async def _react(
    use_case: ReactToCommentUseCase,
    comment_id: str,
    reaction: ReactionType,
    action: ReactionAction,
) -> ReactToCommentResponse:
    """Run a reaction and map domain errors to HTTP errors."""
    try:
        return await use_case.execute(
            ReactToCommentRequest(
                comment_id=comment_id,
                reaction=reaction,
                action=action,
            )
        )
    except CommentNotFoundError as e:
        logfire.warn(
            "Reaction on missing comment",
            comment_id=comment_id,
            reaction=reaction.value,
        )
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.put("/{comment_id}/increaseLike", response_model=ReactToCommentResponse)
async def increase_like(
    comment_id: str,
    react_use_case: FromDishka[ReactToCommentUseCase],
) -> ReactToCommentResponse:
    """Increase a comment's like count."""
    return await _react(
        react_use_case, comment_id, ReactionType.LIKE, ReactionAction.INCREASE
    )


@router.put("/{comment_id}/decreaseLike", response_model=ReactToCommentResponse)
async def decrease_like(
    comment_id: str,
    react_use_case: FromDishka[ReactToCommentUseCase],
) -> ReactToCommentResponse:
    """Decrease a comment's like count (not below 0)."""
    return await _react(
        react_use_case, comment_id, ReactionType.LIKE, ReactionAction.DECREASE
    )


@router.put("/{comment_id}/increaseDislike", response_model=ReactToCommentResponse)
async def increase_dislike(
    comment_id: str,
    react_use_case: FromDishka[ReactToCommentUseCase],
) -> ReactToCommentResponse:
    """Increase a comment's dislike count."""
    return await _react(
        react_use_case, comment_id, ReactionType.DISLIKE, ReactionAction.INCREASE
    )


@router.put("/{comment_id}/decreaseDislike", response_model=ReactToCommentResponse)
async def decrease_dislike(
    comment_id: str,
    react_use_case: FromDishka[ReactToCommentUseCase],
) -> ReactToCommentResponse:
    """Decrease a comment's dislike count (not below 0)."""
    return await _react(
        react_use_case, comment_id, ReactionType.DISLIKE, ReactionAction.DECREASE
    )
