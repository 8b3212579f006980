"""Comment store providers."""

from dishka import Scope, provide

from commentary.domain.repository import CommentRepository
from commentary.persistence.repository.inmemory import InMemoryCommentRepository
from commentary.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Mockable "persistence" component: supplies the CommentRepository."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    One in-process comment store shared by every request for the lifetime
    of the app.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide the shared comment repository."""
        return InMemoryCommentRepository()
