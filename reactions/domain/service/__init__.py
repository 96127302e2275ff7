"""Domain services."""

from .base import Service
from .config_service import ConfigService
from .reaction_service import ReactionService
from .voter_identity_service import VoterIdentityService

__all__ = [
    "ConfigService",
    "ReactionService",
    "Service",
    "VoterIdentityService",
]
