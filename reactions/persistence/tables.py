"""SQLAlchemy table definitions for post reactions.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Enum,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# REACTION VOTES TABLE (ledger, one row per voter per item)
# ============================================================================
reaction_votes_table = Table(
    "reaction_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("voter_id", String(160), nullable=False),  # 'user:<id>' or 'guest:<token>'
    Column("item_id", BigInteger, nullable=False),
    Column(
        "reaction",
        Enum("like", "dislike", name="reaction_kind", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("voter_id", "item_id", name="unique_reaction_vote"),
)

Index("idx_reaction_votes_item_id", reaction_votes_table.c.item_id)

# ============================================================================
# REACTION TALLIES TABLE (denormalized counters, one row per item)
# ============================================================================
reaction_tallies_table = Table(
    "reaction_tallies",
    metadata,
    Column("item_id", BigInteger, primary_key=True, autoincrement=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("dislike_count", Integer, nullable=False, server_default="0"),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
    CheckConstraint("dislike_count >= 0", name="dislike_count_non_negative"),
)

Index("idx_reaction_tallies_updated_at", reaction_tallies_table.c.updated_at.desc())

# ============================================================================
# REACTION CONFIG TABLE (admin-controlled key/value settings)
# ============================================================================
reaction_config_table = Table(
    "reaction_config",
    metadata,
    Column("key", String(64), primary_key=True),
    Column("value", Text, nullable=False),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
