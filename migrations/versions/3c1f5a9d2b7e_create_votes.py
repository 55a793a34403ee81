"""create_votes

Create the voting schema for course and professor reviews:
- vote_direction enum (helpful, unhelpful)
- votes table, one row per (review, caller)

Revision ID: 3c1f5a9d2b7e
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f5a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM type (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vote_direction AS ENUM ('helpful', 'unhelpful');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("review_id", sa.UUID(), nullable=False),
        sa.Column("caller_id", sa.UUID(), nullable=False),
        sa.Column("display_id", sa.String(64), nullable=False),
        sa.Column(
            "direction",
            postgresql.ENUM(
                "helpful", "unhelpful", name="vote_direction", create_type=False
            ),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "review_id", "caller_id", name="unique_vote_per_caller"
        ),
    )
    # Batch lookups filter by caller first
    op.create_index("idx_votes_caller_id", "votes", ["caller_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_caller_id", table_name="votes")
    op.drop_table("votes")
    op.execute("DROP TYPE IF EXISTS vote_direction")
