"""Domain value objects for ratings.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from ratings.domain.value.common import RootValueObject, ValueObject


class VoteDirection(str, Enum):
    """A caller's judgment on a review."""

    HELPFUL = "helpful"
    UNHELPFUL = "unhelpful"


class VoteAction(str, Enum):
    """What a vote mutation did to the stored row."""

    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"
    DELETED = "deleted"


class DisplayId(RootValueObject[str]):
    """Rotating anonymous token shown publicly instead of the caller identity.

    Not unique per voter; refreshing it never affects vote uniqueness.
    """

    @field_validator("root")
    @classmethod
    def validate_display_id(cls, v: str) -> str:
        """Validate token is not empty and fits the column."""
        if len(v) < 1 or len(v) > 64:
            raise ValueError("Display identity must be 1-64 characters")
        return v


class VoteTally(ValueObject):
    """Helpful/unhelpful counts for one review.

    The net score (helpful - unhelpful) is a read-side projection.
    """

    helpful: int = Field(default=0)
    unhelpful: int = Field(default=0)

    @property
    def net(self) -> int:
        """Net score."""
        return self.helpful - self.unhelpful

    def transition(
        self,
        previous: Optional[VoteDirection],
        new: Optional[VoteDirection],
    ) -> "VoteTally":
        """Apply one vote change as a single step.

        Undo the previous direction's contribution, then apply the new one.
        A switch moves one unit off one counter and onto the other.

        Args:
            previous: Direction held before the change (None for no vote)
            new: Direction held after the change (None for no vote)

        Returns:
            New tally
        """
        helpful = self.helpful
        unhelpful = self.unhelpful

        if previous == VoteDirection.HELPFUL:
            helpful -= 1
        elif previous == VoteDirection.UNHELPFUL:
            unhelpful -= 1

        if new == VoteDirection.HELPFUL:
            helpful += 1
        elif new == VoteDirection.UNHELPFUL:
            unhelpful += 1

        return VoteTally(helpful=helpful, unhelpful=unhelpful)


def next_direction(
    current: Optional[VoteDirection], requested: VoteDirection
) -> Optional[VoteDirection]:
    """Resolve a cast against the current state.

    Casting the direction already held toggles the vote off; anything else
    lands on the requested direction.
    """
    if current == requested:
        return None
    return requested
