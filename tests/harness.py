"""Test harness for unit, integration and E2E tests.

Integration tests assume a PostgreSQL server is reachable at the configured
DATABASE__URL with migrations applied.
Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio

from reactions.util.di import Component
from tests.di import build_test_container

GUEST_COOKIE = "reaction_voter"
ADMIN_TOKEN = "test-admin-token"
JWT_SECRET = "test-secret"


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_cast_vote(unit_env):
            service = await unit_env.get(ReactionService)
            result = await service.cast_vote(...)
            assert result.outcome is VoteOutcome.VOTED
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        # Build container with specified unmocking
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
