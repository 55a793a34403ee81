"""Wire-to-domain parsing shared by the vote use cases."""

from uuid import UUID

from ratings.domain.error import ValidationError
from ratings.domain.value import CallerId, ReviewId


def parse_review_id(value: str | None) -> ReviewId | None:
    """Parse a review ID, keeping "missing" distinct from "malformed"."""
    if value is None or not value.strip():
        return None
    try:
        return ReviewId(UUID(value.strip()))
    except ValueError:
        raise ValidationError(f"Invalid review_id: {value}")


def split_review_ids(value: str | None) -> list[str]:
    """Split a comma-separated review ID list without parsing the IDs.

    Raises:
        ValidationError: If the list is missing or empty
    """
    parts = [part.strip() for part in (value or "").split(",") if part.strip()]
    if not parts:
        raise ValidationError("review_ids parameter is required")
    return parts


def parse_review_ids(value: str | None) -> list[ReviewId]:
    """Parse a comma-separated review ID list.

    Raises:
        ValidationError: If the list is missing, empty, or has a malformed ID
    """
    parts = split_review_ids(value)
    return [review_id for review_id in map(parse_review_id, parts) if review_id]


def parse_caller_id(value: str | None) -> CallerId | None:
    """Parse the resolved caller ID (None means unauthenticated)."""
    return CallerId(UUID(value)) if value else None
