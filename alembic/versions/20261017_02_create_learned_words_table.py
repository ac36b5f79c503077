"""Create learned_words table"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20261017_02"
down_revision = "20261017_01"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "learned_words",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("word", sa.String(length=100), nullable=False),
        sa.Column(
            "learned_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.UniqueConstraint("user_id", "word", name="uq_learned_words_user_word"),
    )
    op.create_index("ix_learned_words_user_id", "learned_words", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_learned_words_user_id", table_name="learned_words")
    op.drop_table("learned_words")
