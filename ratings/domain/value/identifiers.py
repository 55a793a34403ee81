"""Strongly typed identifiers for ratings domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

VoteId = NewType("VoteId", UUID)
ReviewId = NewType("ReviewId", UUID)

# Durable, auth-backed identity of a voter (never shown publicly)
CallerId = NewType("CallerId", UUID)
