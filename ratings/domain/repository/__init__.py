"""Repository interfaces for the ratings domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from ratings.domain.repository.vote import VoteRepository

__all__ = [
    "VoteRepository",
]
