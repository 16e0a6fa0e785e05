"""Initial migration: create meme template, idea and caption tables

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Templates: user_id NULL = global template
    op.create_table(
        "memetemplate",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("image_url", sa.String(), nullable=True),
        sa.Column("layout_type", sa.String(), nullable=True),
        sa.Column("is_system", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_memetemplate_user_id", "memetemplate", ["user_id"])

    op.create_table(
        "memeidea",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("template_id", sa.String(), nullable=True),
        sa.Column("context", sa.String(), nullable=True),
        sa.Column("topic", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["template_id"],
            ["memetemplate.id"],
        ),
    )
    op.create_index("ix_memeidea_user_id", "memeidea", ["user_id"])

    op.create_table(
        "memecaption",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("meme_idea_id", sa.String(), nullable=False),
        sa.Column("variant_label", sa.String(), nullable=True),
        sa.Column("top_text", sa.String(), nullable=True),
        sa.Column("bottom_text", sa.String(), nullable=True),
        sa.Column("extra_text", sa.String(), nullable=True),
        sa.Column("is_favorite", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_used", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["meme_idea_id"],
            ["memeidea.id"],
        ),
    )
    op.create_index("ix_memecaption_meme_idea_id", "memecaption", ["meme_idea_id"])


def downgrade() -> None:
    op.drop_index("ix_memecaption_meme_idea_id", table_name="memecaption")
    op.drop_table("memecaption")
    op.drop_index("ix_memeidea_user_id", table_name="memeidea")
    op.drop_table("memeidea")
    op.drop_index("ix_memetemplate_user_id", table_name="memetemplate")
    op.drop_table("memetemplate")
