"""Vote entity.

A vote is one caller's helpful/unhelpful judgment on one review.
"""

from datetime import datetime, timezone

from pydantic import Field

from ratings.domain.model.common import DomainModel
from ratings.domain.value import CallerId, DisplayId, ReviewId, VoteDirection, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per (review_id, caller_id), enforced by a unique
      constraint, never by client state
    - caller_id is the durable identity; display_id rotates freely
    - created_at is refreshed on a direction change and acts as "last modified"
    """

    id: VoteId
    review_id: ReviewId
    caller_id: CallerId
    display_id: DisplayId
    direction: VoteDirection
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
