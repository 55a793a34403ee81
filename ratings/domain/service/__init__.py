"""Domain services."""

from .base import Service
from .display_identity_service import DisplayIdentityService
from .jwt_service import JWTService
from .vote_service import CastVoteResult, RemoveVoteResult, VoteService

__all__ = [
    "CastVoteResult",
    "DisplayIdentityService",
    "JWTService",
    "RemoveVoteResult",
    "Service",
    "VoteService",
]
