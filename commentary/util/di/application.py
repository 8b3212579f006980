"""Use case providers."""

from dishka import Scope, provide

from commentary.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetRepliesUseCase,
    ReactToCommentUseCase,
)
from commentary.config import CommentSettings
from commentary.domain.service import CommentService, RankingService
from commentary.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Comment use cases, built per request from the domain services."""

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        ranking_service: RankingService,
        comment_settings: CommentSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            ranking_service=ranking_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_replies_use_case(
        self,
        comment_service: CommentService,
        ranking_service: RankingService,
        comment_settings: CommentSettings,
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(
            comment_service=comment_service,
            ranking_service=ranking_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_react_to_comment_use_case(
        self, comment_service: CommentService
    ) -> ReactToCommentUseCase:
        """Provide react to comment use case."""
        return ReactToCommentUseCase(comment_service=comment_service)
