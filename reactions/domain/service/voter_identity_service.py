"""Voter identity domain service."""

import logfire
from pydantic import ValidationError

from reactions.config import AuthSettings
from reactions.domain.value import GuestToken, VoterId
from reactions.util.jwt import JWTError, verify_token

from .base import Service


class VoterIdentityService(Service):
    """Resolves the opaque voter id for a request.

    Signed-in voters are identified by their account id from a JWT, anonymous
    visitors by a guest cookie token. Both map to a single string id, so the
    one-vote rule treats them the same way.
    """

    USER_PREFIX = "user:"
    GUEST_PREFIX = "guest:"

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize voter identity service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def resolve(
        self, auth_token: str | None, guest_token: str | None
    ) -> VoterId | None:
        """Resolve a voter id without raising.

        A valid auth token wins over a guest token.

        Args:
            auth_token: JWT from the auth cookie (optional)
            guest_token: Guest token from the guest cookie (optional)

        Returns:
            Voter id, or None if neither credential is usable
        """
        if auth_token:
            try:
                payload = verify_token(auth_token, self.auth_settings)
                return VoterId(f"{self.USER_PREFIX}{payload.user_id}")
            except JWTError as e:
                logfire.debug("Auth token rejected, trying guest token", error=str(e))

        if guest_token:
            try:
                token = GuestToken(guest_token)
                return VoterId(f"{self.GUEST_PREFIX}{token.root}")
            except ValidationError:
                logfire.debug("Malformed guest token")

        return None
