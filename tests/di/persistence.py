"""Mock comment store provider."""

from dishka import Scope, provide

from commentary.domain.repository import CommentRepository
from commentary.persistence.repository.inmemory import InMemoryCommentRepository
from commentary.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Empty comment store per request scope, so tests never share comments."""

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self) -> CommentRepository:
        return InMemoryCommentRepository()
