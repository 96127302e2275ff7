"""Reaction settings use cases."""

from pydantic import BaseModel

from reactions.domain.service import ConfigService
from reactions.domain.value import ReactionMode


class UpdateSettingsRequest(BaseModel):
    """Update settings request."""

    mode: str  # Validated by the config service


class SettingsResponse(BaseModel):
    """Current reaction settings."""

    mode: ReactionMode


class GetSettingsUseCase:
    """Use case for reading reaction settings."""

    def __init__(self, config_service: ConfigService) -> None:
        self.config_service = config_service

    async def execute(self) -> SettingsResponse:
        return SettingsResponse(mode=await self.config_service.current_mode())


class UpdateSettingsUseCase:
    """Use case for changing reaction settings."""

    def __init__(self, config_service: ConfigService) -> None:
        """Initialize update settings use case.

        Args:
            config_service: Config domain service
        """
        self.config_service = config_service

    async def execute(self, request: UpdateSettingsRequest) -> SettingsResponse:
        """Execute update settings flow.

        Switching to like-only keeps existing dislike counts; they just stop
        growing.

        Raises:
            InvalidRequestError: If the mode is unknown
        """
        mode = await self.config_service.update_mode(request.mode)
        return SettingsResponse(mode=mode)
