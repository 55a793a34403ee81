"""Client-side vote state."""

from .vote_controller import ClientVoteController, VoteSnapshot

__all__ = [
    "ClientVoteController",
    "VoteSnapshot",
]
