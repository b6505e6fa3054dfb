"""Initial debate-graph schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "sources",
        sa.Column("name", sa.String(length=512), primary_key=True),
        sa.Column("text", sa.Text(), nullable=True),
        sa.Column("url", sa.Text(), nullable=True),
    )

    op.create_table(
        "statements",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("text", sa.String(length=1024), nullable=False),
        sa.Column("counter_statement", sa.Integer(), sa.ForeignKey("statements.id"), nullable=True),
        sa.Column("source", sa.String(length=512), sa.ForeignKey("sources.name"), nullable=True),
    )
    op.create_index("ix_statements_counter_statement", "statements", ["counter_statement"])

    op.create_table(
        "arguments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("claim", sa.Integer(), sa.ForeignKey("statements.id"), nullable=False),
        sa.Column("source", sa.String(length=512), sa.ForeignKey("sources.name"), nullable=True),
    )
    op.create_index("ix_arguments_claim", "arguments", ["claim"])

    op.create_table(
        "premises",
        sa.Column("argument", sa.Integer(), sa.ForeignKey("arguments.id"), nullable=False),
        sa.Column("premise", sa.Integer(), sa.ForeignKey("statements.id"), nullable=False),
        sa.PrimaryKeyConstraint("argument", "premise"),
    )
    op.create_index("ix_premises_premise", "premises", ["premise"])

    op.create_table(
        "topics",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=512), nullable=False, unique=True),
        sa.Column("argument", sa.Integer(), sa.ForeignKey("arguments.id"), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("topics")
    op.drop_index("ix_premises_premise", table_name="premises")
    op.drop_table("premises")
    op.drop_index("ix_arguments_claim", table_name="arguments")
    op.drop_table("arguments")
    op.drop_index("ix_statements_counter_statement", table_name="statements")
    op.drop_table("statements")
    op.drop_table("sources")
