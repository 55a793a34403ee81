"""SQLAlchemy table definitions for ratings.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, MetaData, String, Table, UniqueConstraint
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# VOTES TABLE
# ============================================================================
# review_id references reviews owned by the listing service, so no FK here.
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("review_id", UUID, nullable=False),
    Column("caller_id", UUID, nullable=False),  # Durable auth identity
    Column("display_id", String(64), nullable=False),  # Rotating anonymous token
    Column(
        "direction",
        postgresql.ENUM(
            "helpful", "unhelpful", name="vote_direction", create_type=False
        ),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("review_id", "caller_id", name="unique_vote_per_caller"),
)

Index("idx_votes_caller_id", votes_table.c.caller_id)
