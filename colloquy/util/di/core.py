"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from colloquy.config import AuthSettings, ModerationSettings, Settings
from colloquy.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider.

    Settings are loaded from environment variables and .env file; the
    nested sections are exposed on their own so services depend only on
    what they read.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        """Provide moderation policy settings."""
        return settings.moderation
