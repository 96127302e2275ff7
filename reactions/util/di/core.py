"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from reactions.config import AdminSettings, AuthSettings, ReactionSettings, Settings
from reactions.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
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
    def provide_reaction_settings(self, settings: Settings) -> ReactionSettings:
        """Provide reaction settings."""
        return settings.reactions

    @provide(scope=Scope.APP)
    def provide_admin_settings(self, settings: Settings) -> AdminSettings:
        """Provide admin settings."""
        return settings.admin
