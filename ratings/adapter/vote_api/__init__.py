"""Vote API client adapter."""

from .client import HttpVoteApiClient, VoteApiClient

__all__ = [
    "HttpVoteApiClient",
    "VoteApiClient",
]
