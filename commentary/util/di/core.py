"""Configuration providers."""

from dishka import Scope, provide

from commentary.config import CommentSettings, Settings
from commentary.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings, read once from the environment (and .env) per container."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Comment limits, split out so services need not see all settings."""
        return settings.comments
