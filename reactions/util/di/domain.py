"""Domain layer DI providers."""

from dishka import Scope, provide

from reactions.config import AuthSettings, ReactionSettings
from reactions.domain.repository import ReactionConfigRepository, VoteStore
from reactions.domain.service import (
    ConfigService,
    ReactionService,
    VoterIdentityService,
)
from reactions.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; they hold no state of their own.
    """

    scope = Scope.REQUEST

    @provide
    def get_reaction_service(self, vote_store: VoteStore) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(vote_store=vote_store)

    @provide
    def get_config_service(
        self,
        config_repository: ReactionConfigRepository,
        reaction_settings: ReactionSettings,
    ) -> ConfigService:
        """Provide reaction config domain service."""
        return ConfigService(
            config_repository=config_repository,
            reaction_settings=reaction_settings,
        )

    @provide
    def get_voter_identity_service(
        self, auth_settings: AuthSettings
    ) -> VoterIdentityService:
        """Provide voter identity domain service."""
        return VoterIdentityService(auth_settings=auth_settings)
