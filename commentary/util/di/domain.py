"""Domain service providers."""

from dishka import Scope, provide

from commentary.config import CommentSettings
from commentary.domain.repository import CommentRepository
from commentary.domain.service import CommentService, RankingService
from commentary.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Comment and ranking services, built per request.

    REQUEST scope lets a REQUEST-scoped mock store back the services in tests.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        return CommentService(
            comment_repository=comment_repository,
            comment_settings=comment_settings,
        )

    @provide
    def get_ranking_service(self) -> RankingService:
        """Ranking service on the wall clock."""
        return RankingService()
