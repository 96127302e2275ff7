"""Unit tests for VoterIdentityService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from reactions.domain.service import VoterIdentityService
from reactions.persistence.tables import reaction_votes_table
from reactions.util.jwt import MAX_USER_ID_LENGTH, create_token


@pytest.fixture
def identity_service(auth_settings):
    """Identity service with test auth settings."""
    return VoterIdentityService(auth_settings=auth_settings)


class TestResolve:
    """Tests for resolve method."""

    def test_valid_auth_token_resolves_to_user(self, identity_service, auth_settings):
        """A valid JWT identifies a signed-in voter."""
        token = create_token("1234", auth_settings)

        voter_id = identity_service.resolve(auth_token=token, guest_token=None)

        assert voter_id == "user:1234"

    def test_auth_token_wins_over_guest_token(self, identity_service, auth_settings):
        """Signed-in identity takes precedence over the guest cookie."""
        token = create_token("1234", auth_settings)

        voter_id = identity_service.resolve(auth_token=token, guest_token="abc")

        assert voter_id == "user:1234"

    def test_guest_token_resolves_to_guest(self, identity_service):
        """A well-formed guest token identifies an anonymous voter."""
        voter_id = identity_service.resolve(auth_token=None, guest_token="Ab_9-x")

        assert voter_id == "guest:Ab_9-x"

    def test_invalid_auth_token_falls_back_to_guest(self, identity_service):
        """A forged JWT is ignored in favour of the guest token."""
        forged = jwt.encode(
            {
                "user_id": "1234",
                "exp": datetime.now(timezone.utc) + timedelta(days=1),
            },
            "wrong-secret",
            algorithm="HS256",
        )

        voter_id = identity_service.resolve(auth_token=forged, guest_token="abc")

        assert voter_id == "guest:abc"

    def test_expired_auth_token_is_rejected(self, identity_service, auth_settings):
        """Expired JWTs do not identify anybody."""
        expired = jwt.encode(
            {
                "user_id": "1234",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        assert identity_service.resolve(auth_token=expired, guest_token=None) is None

    @pytest.mark.parametrize(
        "guest_token", ["", "has space", "semi;colon", "x" * 129, "ünicode"]
    )
    def test_malformed_guest_token_is_rejected(self, identity_service, guest_token):
        """Guest tokens must be 1-128 characters of [A-Za-z0-9_-]."""
        assert identity_service.resolve(auth_token=None, guest_token=guest_token) is None

    def test_oversized_user_id_is_rejected(self, identity_service, auth_settings):
        """Account ids too long for the voter_id column do not identify anybody."""
        voter_id_length = reaction_votes_table.c.voter_id.type.length
        longest = create_token("u" * MAX_USER_ID_LENGTH, auth_settings)
        too_long = create_token("u" * (MAX_USER_ID_LENGTH + 1), auth_settings)

        assert identity_service.resolve(auth_token=longest, guest_token=None) == (
            "user:" + "u" * MAX_USER_ID_LENGTH
        )
        assert identity_service.resolve(auth_token=too_long, guest_token=None) is None
        assert len("user:" + "u" * MAX_USER_ID_LENGTH) <= voter_id_length

    def test_no_credentials_resolves_to_none(self, identity_service):
        """Without cookies there is no voter."""
        assert identity_service.resolve(auth_token=None, guest_token=None) is None
