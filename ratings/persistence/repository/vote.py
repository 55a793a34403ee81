"""PostgreSQL implementation of Vote repository."""

from collections.abc import AsyncIterator, Collection
from contextlib import asynccontextmanager
from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ratings.domain.error import ConflictError, StoreError
from ratings.domain.model import Vote
from ratings.domain.repository import VoteRepository
from ratings.domain.value import CallerId, DisplayId, ReviewId, VoteDirection, VoteId
from ratings.persistence.mappers import row_to_vote, vote_to_dict
from ratings.persistence.tables import votes_table


@asynccontextmanager
async def _store_errors(operation: str) -> AsyncIterator[None]:
    """Map driver failures to StoreError without leaking their detail upward."""
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error("Vote store failure", operation=operation, error=str(e))
        raise StoreError(operation) from e


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_one(
        self, review_id: ReviewId, caller_id: CallerId
    ) -> Optional[Vote]:
        """Find a caller's vote on a review."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.review_id == review_id,
                votes_table.c.caller_id == caller_id,
            )
        )
        async with _store_errors("find_one"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def insert(self, vote: Vote) -> Vote:
        """Insert a vote.

        Runs in a SAVEPOINT so a unique_vote_per_caller violation leaves the
        request transaction usable for the follow-up update.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        async with _store_errors("insert"):
            try:
                async with self.session.begin_nested():
                    await self.session.execute(stmt)
            except IntegrityError as e:
                raise ConflictError(str(vote.review_id), str(vote.caller_id)) from e
        return vote

    async def update_direction(
        self,
        vote_id: VoteId,
        direction: VoteDirection,
        timestamp: datetime,
        display_id: DisplayId,
    ) -> Vote:
        """Switch a vote's direction in place."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(
                direction=direction.value,
                created_at=timestamp,
                display_id=display_id.root,
            )
            .returning(*votes_table.c)
        )
        async with _store_errors("update_direction"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        if row is None:
            raise StoreError("update_direction")
        return row_to_vote(row._asdict())

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        async with _store_errors("delete"):
            await self.session.execute(stmt)
            await self.session.flush()

    async def find_many(
        self, review_ids: Collection[ReviewId], caller_id: CallerId
    ) -> List[Vote]:
        """Find a caller's votes on several reviews (batch query)."""
        if not review_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.caller_id == caller_id,
                votes_table.c.review_id.in_(list(review_ids)),
            )
        )
        async with _store_errors("find_many"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_vote(row._asdict()) for row in rows]
