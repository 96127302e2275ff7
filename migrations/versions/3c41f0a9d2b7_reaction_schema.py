"""reaction_schema

Create the schema for post reactions:
- Reaction votes (ledger, one row per voter per item)
- Reaction tallies (like/dislike counters per item)
- Reaction config (admin-controlled settings such as the mode)

Revision ID: 3c41f0a9d2b7
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41f0a9d2b7"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13, pgcrypto covers older servers
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # Create ENUM type (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE reaction_kind AS ENUM ('like', 'dislike');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # Reaction votes
    op.create_table(
        "reaction_votes",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("voter_id", sa.String(length=160), nullable=False),
        sa.Column("item_id", sa.BigInteger(), nullable=False),
        sa.Column(
            "reaction",
            postgresql.ENUM("like", "dislike", name="reaction_kind", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("voter_id", "item_id", name="unique_reaction_vote"),
    )
    op.create_index("idx_reaction_votes_item_id", "reaction_votes", ["item_id"])

    # Reaction tallies
    op.create_table(
        "reaction_tallies",
        sa.Column("item_id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("like_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("dislike_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("item_id"),
        sa.CheckConstraint("like_count >= 0", name="like_count_non_negative"),
        sa.CheckConstraint("dislike_count >= 0", name="dislike_count_non_negative"),
    )
    op.create_index(
        "idx_reaction_tallies_updated_at",
        "reaction_tallies",
        [sa.text("updated_at DESC")],
    )

    # Reaction config
    op.create_table(
        "reaction_config",
        sa.Column("key", sa.String(length=64), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("key"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("reaction_config")
    op.drop_index("idx_reaction_tallies_updated_at", table_name="reaction_tallies")
    op.drop_table("reaction_tallies")
    op.drop_index("idx_reaction_votes_item_id", table_name="reaction_votes")
    op.drop_table("reaction_votes")
    op.execute("DROP TYPE IF EXISTS reaction_kind")
