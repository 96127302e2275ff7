"""End-to-end tests for the reaction endpoints."""

import pytest
from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient

from reactions.config import AuthSettings
from reactions.domain.error import StorageUnavailableError
from reactions.domain.repository import VoteStore
from reactions.interface.api.app import create_app
from reactions.persistence.repository.inmemory import InMemoryVoteStore
from reactions.util.jwt import create_token
from tests.harness import GUEST_COOKIE, JWT_SECRET
from tests.di import build_test_container


class UnavailableVoteStore(InMemoryVoteStore):
    """Vote store whose backend is down."""

    async def record_vote(self, voter_id, item_id, reaction):
        raise StorageUnavailableError("record_vote")

    async def get_counts(self, item_id):
        raise StorageUnavailableError("get_counts")


class UnavailableStoreProvider(Provider):
    """Replaces the vote store with one that always fails."""

    @provide(scope=Scope.APP)
    def get_vote_store(self) -> VoteStore:
        return UnavailableVoteStore()


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(create_app(build_test_container()))


def as_guest(client: TestClient, token: str) -> TestClient:
    """Switch the client to an anonymous visitor."""
    client.cookies.clear()
    client.cookies.set(GUEST_COOKIE, token)
    return client


class TestReact:
    """End-to-end tests for POST /react."""

    def test_vote_then_duplicate_then_other_voter(self, client):
        """Voter 7 likes, repeats, then voter 8 dislikes item 42."""
        # Act
        first = as_guest(client, "voter7").post(
            "/react", json={"item_id": 42, "reaction": "like"}
        )
        repeat = client.post("/react", json={"item_id": 42, "reaction": "like"})
        other = as_guest(client, "voter8").post(
            "/react", json={"item_id": 42, "reaction": "dislike"}
        )

        # Assert
        assert first.status_code == 200
        assert first.json() == {
            "likes": 1,
            "dislikes": 0,
            "message": "Thanks for your feedback!",
        }

        assert repeat.status_code == 409
        assert repeat.json() == {
            "message": "You already voted on this item.",
            "already": True,
            "likes": 1,
            "dislikes": 0,
        }

        assert other.status_code == 200
        assert (other.json()["likes"], other.json()["dislikes"]) == (1, 1)

    def test_signed_in_voter_is_identified_by_auth_cookie(self, client):
        """The auth cookie identifies a voter across guest tokens."""
        # Arrange
        token = create_token("1234", AuthSettings(jwt_secret=JWT_SECRET))
        client.cookies.set("auth_token", token)

        # Act
        first = client.post("/react", json={"item_id": 1, "reaction": "like"})
        client.cookies.set(GUEST_COOKIE, "another-browser")
        repeat = client.post("/react", json={"item_id": 1, "reaction": "like"})

        # Assert
        assert first.status_code == 200
        assert repeat.status_code == 409

    def test_no_identity_is_unauthenticated(self, client):
        """Without any voter cookie the vote is refused."""
        response = client.post("/react", json={"item_id": 42, "reaction": "like"})

        assert response.status_code == 401
        assert "message" in response.json()

    def test_malformed_guest_cookie_is_unauthenticated(self, client):
        """Guest tokens with forbidden characters do not identify anybody."""
        response = as_guest(client, "not.valid").post(
            "/react", json={"item_id": 42, "reaction": "like"}
        )

        assert response.status_code == 401

    @pytest.mark.parametrize(
        "body",
        [
            {"item_id": -3, "reaction": "like"},
            {"item_id": 0, "reaction": "like"},
            {"item_id": 42, "reaction": "love"},
            {"item_id": "abc", "reaction": "like"},
            {"reaction": "like"},
            {"item_id": 42},
            {"item_id": True, "reaction": "like"},
            {"item_id": "42", "reaction": "like"},
            {"item_id": 42.0, "reaction": "like"},
            {"item_id": 2**63, "reaction": "like"},
            {"item_id": 10**30, "reaction": "like"},
        ],
    )
    def test_malformed_body_is_invalid_request(self, client, body):
        """Malformed input answers 400 with a message."""
        response = as_guest(client, "voter7").post("/react", json=body)

        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid request.")

        tally = client.get("/tally", params={"item_id": 42})
        assert tally.json() == {"likes": 0, "dislikes": 0}

    def test_dislike_in_like_only_mode_is_forbidden(self, monkeypatch):
        """Like-only mode refuses dislikes and leaves the tally untouched."""
        # Arrange
        monkeypatch.setenv("REACTIONS__DEFAULT_MODE", "like_only")
        client = TestClient(create_app(build_test_container()))

        # Act
        response = as_guest(client, "voter1").post(
            "/react", json={"item_id": 5, "reaction": "dislike"}
        )
        tally = client.get("/tally", params={"item_id": 5})

        # Assert
        assert response.status_code == 403
        assert response.json() == {"message": "Dislike is disabled."}
        assert tally.json() == {"likes": 0, "dislikes": 0}

    def test_storage_failure_is_generic_500(self):
        """Storage failures answer 500 without leaking details."""
        # Arrange
        client = TestClient(
            create_app(build_test_container(overrides=[UnavailableStoreProvider()]))
        )

        # Act
        response = as_guest(client, "voter7").post(
            "/react", json={"item_id": 42, "reaction": "like"}
        )

        # Assert
        assert response.status_code == 500
        assert response.json() == {"message": "Something went wrong. Please try again."}


class TestTally:
    """End-to-end tests for GET /tally."""

    def test_unknown_item_has_zero_counts(self, client):
        """Items nobody voted on read as zero."""
        response = client.get("/tally", params={"item_id": 999})

        assert response.status_code == 200
        assert response.json() == {"likes": 0, "dislikes": 0}

    def test_tally_reflects_votes(self, client):
        """Tally shows counts after votes, without needing an identity."""
        # Arrange
        as_guest(client, "a").post("/react", json={"item_id": 3, "reaction": "like"})
        as_guest(client, "b").post("/react", json={"item_id": 3, "reaction": "like"})
        client.cookies.clear()

        # Act
        response = client.get("/tally", params={"item_id": 3})

        # Assert
        assert response.json() == {"likes": 2, "dislikes": 0}

    @pytest.mark.parametrize("item_id", ["abc", "-3", "0", str(2**63)])
    def test_malformed_item_id_is_invalid_request(self, client, item_id):
        """Non-numeric and non-positive ids answer 400."""
        response = client.get("/tally", params={"item_id": item_id})

        assert response.status_code == 400

    def test_storage_failure_is_generic_500(self):
        """Storage failures on read answer 500."""
        client = TestClient(
            create_app(build_test_container(overrides=[UnavailableStoreProvider()]))
        )

        response = client.get("/tally", params={"item_id": 1})

        assert response.status_code == 500
        assert response.json() == {"message": "Something went wrong. Please try again."}


class TestReactionStatus:
    """End-to-end tests for GET /react/status."""

    def test_status_before_and_after_voting(self, client):
        """has_voted flips once the visitor votes; mode is reported."""
        # Arrange
        as_guest(client, "voter7")

        # Act
        before = client.get("/react/status", params={"item_id": 42})
        client.post("/react", json={"item_id": 42, "reaction": "dislike"})
        after = client.get("/react/status", params={"item_id": 42})

        # Assert
        assert before.json() == {
            "likes": 0,
            "dislikes": 0,
            "has_voted": False,
            "mode": "like_dislike",
        }
        assert after.json()["has_voted"] is True
        assert after.json()["dislikes"] == 1

    def test_status_without_identity(self, client):
        """Anonymous visitors without a cookie still get counts."""
        response = client.get("/react/status", params={"item_id": 42})

        assert response.status_code == 200
        assert response.json()["has_voted"] is False


class TestHealth:
    """End-to-end tests for GET /health."""

    def test_health(self, client):
        """Health check reports the service is up."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
