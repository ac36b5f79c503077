"""Create vocabularies table"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20261017_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "vocabularies",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("word", sa.String(length=100), nullable=False),
        sa.Column("translation", sa.Text(), nullable=True),
        sa.Column("phonetics_json", sa.Text(), nullable=True),
        sa.Column("meanings_json", sa.Text(), nullable=True),
        sa.Column("payload_version", sa.Integer(), server_default="1", nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("word", name="uq_vocabularies_word"),
    )


def downgrade() -> None:
    op.drop_table("vocabularies")
