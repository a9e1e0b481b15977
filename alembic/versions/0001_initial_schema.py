"""Initial schema: users, sessions, sheets, fields, rows and cells

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

JSON_VALUE = sa.JSON(none_as_null=True).with_variant(
    postgresql.JSONB(none_as_null=True), "postgresql"
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("email_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_user_email", "user", ["email"], unique=True)

    op.create_table(
        "session",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(36),
            sa.ForeignKey("user.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("ip_address", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_session_user_id", "session", ["user_id"])

    op.create_table(
        "sheets",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column(
            "user_id",
            sa.String(36),
            sa.ForeignKey("user.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_sheets_user_id", "sheets", ["user_id"])
    op.create_index("ix_sheets_name", "sheets", ["name"])

    op.create_table(
        "fields",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "sheet_id",
            sa.Uuid(),
            sa.ForeignKey("sheets.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False, server_default="text"),
        sa.Column("options", JSON_VALUE, nullable=True),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_fields_sheet_id", "fields", ["sheet_id"])

    op.create_table(
        "rows",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "sheet_id",
            sa.Uuid(),
            sa.ForeignKey("sheets.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_rows_sheet_id", "rows", ["sheet_id"])

    op.create_table(
        "cells",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "row_id",
            sa.Uuid(),
            sa.ForeignKey("rows.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "field_id",
            sa.Uuid(),
            sa.ForeignKey("fields.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("value", JSON_VALUE, nullable=True),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.UniqueConstraint("row_id", "field_id", name="uq_cells_row_field"),
    )
    op.create_index("ix_cells_row_id", "cells", ["row_id"])
    op.create_index("ix_cells_field_id", "cells", ["field_id"])


def downgrade() -> None:
    op.drop_table("cells")
    op.drop_table("rows")
    op.drop_table("fields")
    op.drop_table("sheets")
    op.drop_table("session")
    op.drop_table("user")
