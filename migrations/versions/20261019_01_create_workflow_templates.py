"""create workflow templates table

Revision ID: 20261019_01
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261019_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "workflow_templates",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("category", sa.String(length=100), nullable=False, server_default="Other"),
        sa.Column("link", sa.String(length=500), nullable=False, server_default="#"),
        sa.Column("html_content", sa.Text(), nullable=False, server_default=""),
        sa.Column("content_length", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("author", sa.String(length=200), nullable=False, server_default="Anonymous"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="50000"),
        sa.Column("downloads", sa.Integer(), nullable=False, server_default="25"),
        sa.Column("rating", sa.Numeric(2, 1), nullable=False, server_default="4.5"),
        sa.Column("is_free", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("status", sa.String(length=50), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_workflow_templates_status_created", "workflow_templates", ["status", "created_at"]
    )
    op.create_index(
        "ix_workflow_templates_category_status", "workflow_templates", ["category", "status"]
    )


def downgrade() -> None:
    op.drop_index("ix_workflow_templates_category_status", table_name="workflow_templates")
    op.drop_index("ix_workflow_templates_status_created", table_name="workflow_templates")
    op.drop_table("workflow_templates")
