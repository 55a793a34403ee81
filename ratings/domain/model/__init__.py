"""Domain model entities for ratings."""

from ratings.domain.model.vote import Vote

__all__ = [
    "Vote",
]
