"""Unit tests for ConfigService."""

import pytest

from reactions.config import ReactionSettings
from reactions.domain.error import InvalidRequestError
from reactions.domain.repository import ReactionConfigRepository
from reactions.domain.service import ConfigService
from reactions.domain.value import ReactionMode
from reactions.persistence.repository.inmemory import InMemoryReactionConfigRepository
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCurrentMode:
    """Tests for current_mode method."""

    @pytest.mark.asyncio
    async def test_defaults_to_configured_mode(self):
        """Without a stored mode, the configured default applies."""
        service = ConfigService(
            config_repository=InMemoryReactionConfigRepository(),
            reaction_settings=ReactionSettings(default_mode="like_only"),
        )

        assert await service.current_mode() is ReactionMode.LIKE_ONLY

    @pytest.mark.asyncio
    async def test_stored_mode_wins_over_default(self):
        """A stored mode overrides the configured default."""
        service = ConfigService(
            config_repository=InMemoryReactionConfigRepository(
                mode=ReactionMode.LIKE_ONLY
            ),
            reaction_settings=ReactionSettings(default_mode="like_dislike"),
        )

        assert await service.current_mode() is ReactionMode.LIKE_ONLY

    @pytest.mark.asyncio
    async def test_default_from_environment(self, unit_env):
        """The container wires the default from settings."""
        service = await unit_env.get(ConfigService)

        assert await service.current_mode() is ReactionMode.LIKE_DISLIKE


class TestUpdateMode:
    """Tests for update_mode method."""

    @pytest.mark.asyncio
    async def test_update_mode_is_read_back(self, unit_env):
        """The next read sees the updated mode."""
        # Arrange
        service = await unit_env.get(ConfigService)
        repo = await unit_env.get(ReactionConfigRepository)

        # Act
        result = await service.update_mode("like_only")

        # Assert
        assert result is ReactionMode.LIKE_ONLY
        assert await service.current_mode() is ReactionMode.LIKE_ONLY
        assert await repo.get_mode() is ReactionMode.LIKE_ONLY

    @pytest.mark.asyncio
    @pytest.mark.parametrize("mode", ["dislike_only", "", "LIKE_ONLY"])
    async def test_unknown_mode_raises(self, unit_env, mode):
        """Unknown modes are rejected and nothing is stored."""
        # Arrange
        service = await unit_env.get(ConfigService)
        repo = await unit_env.get(ReactionConfigRepository)

        # Act & Assert
        with pytest.raises(InvalidRequestError):
            await service.update_mode(mode)

        assert await repo.get_mode() is None
