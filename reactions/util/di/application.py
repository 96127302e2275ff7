"""Application layer DI providers."""

from dishka import Scope, provide

from reactions.application.usecase.admin import (
    EraseReactionsUseCase,
    GetSettingsUseCase,
    ListTalliesUseCase,
    UpdateSettingsUseCase,
)
from reactions.application.usecase.reaction import (
    CastVoteUseCase,
    GetReactionStatusUseCase,
    GetTallyUseCase,
)
from reactions.domain.service import ConfigService, ReactionService
from reactions.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Reaction use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, reaction_service: ReactionService, config_service: ConfigService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            reaction_service=reaction_service, config_service=config_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_tally_use_case(
        self, reaction_service: ReactionService
    ) -> GetTallyUseCase:
        """Provide get tally use case."""
        return GetTallyUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_get_reaction_status_use_case(
        self, reaction_service: ReactionService, config_service: ConfigService
    ) -> GetReactionStatusUseCase:
        """Provide get reaction status use case."""
        return GetReactionStatusUseCase(
            reaction_service=reaction_service, config_service=config_service
        )

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_get_settings_use_case(
        self, config_service: ConfigService
    ) -> GetSettingsUseCase:
        """Provide get settings use case."""
        return GetSettingsUseCase(config_service=config_service)

    @provide(scope=Scope.REQUEST)
    def get_update_settings_use_case(
        self, config_service: ConfigService
    ) -> UpdateSettingsUseCase:
        """Provide update settings use case."""
        return UpdateSettingsUseCase(config_service=config_service)

    @provide(scope=Scope.REQUEST)
    def get_list_tallies_use_case(
        self, reaction_service: ReactionService
    ) -> ListTalliesUseCase:
        """Provide list tallies use case."""
        return ListTalliesUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_erase_reactions_use_case(
        self, reaction_service: ReactionService
    ) -> EraseReactionsUseCase:
        """Provide erase reactions use case."""
        return EraseReactionsUseCase(reaction_service=reaction_service)
