"""Domain value objects for ratings."""

from ratings.domain.value.identifiers import CallerId, ReviewId, VoteId
from ratings.domain.value.types import (
    DisplayId,
    VoteAction,
    VoteDirection,
    VoteTally,
    next_direction,
)

__all__ = [
    # Identifiers
    "CallerId",
    "ReviewId",
    "VoteId",
    # Types
    "DisplayId",
    "VoteAction",
    "VoteDirection",
    "VoteTally",
    "next_direction",
]
