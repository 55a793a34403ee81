"""PostgreSQL repository implementations."""

from ratings.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresVoteRepository",
]
