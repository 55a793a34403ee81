"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from ratings.domain.model import Vote
from ratings.domain.value import CallerId, DisplayId, ReviewId, VoteDirection, VoteId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        review_id=ReviewId(_uuid(row["review_id"])),
        caller_id=CallerId(_uuid(row["caller_id"])),
        display_id=DisplayId(row["display_id"]),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": vote.id,
        "review_id": vote.review_id,
        "caller_id": vote.caller_id,
        "display_id": vote.display_id.root,
        "direction": vote.direction.value,
        "created_at": vote.created_at,
    }
