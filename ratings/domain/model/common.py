"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities.

    Entities are frozen; changes produce a new, re-validated instance.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a validated copy with ``changes`` applied.

        Raises:
            pydantic.ValidationError: If a changed field is invalid
        """
        return type(self).model_validate({**dict(self), **changes})
