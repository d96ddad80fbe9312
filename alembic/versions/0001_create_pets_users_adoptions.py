"""Create pets, users and adoptions.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "pets",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(20), nullable=False),
        sa.Column("birth_date", sa.Date(), server_default=sa.func.current_date(), nullable=False),
        sa.Column("breed", sa.String(15), nullable=False),
        sa.Column("gender", sa.String(6), nullable=False),
        sa.Column("size", sa.String(6), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("is_adopted", sa.Boolean(), server_default=sa.false(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("gender IN ('male', 'female')", name=op.f("ck_pets_gender_values")),
        sa.CheckConstraint("size IN ('small', 'medium', 'large')", name=op.f("ck_pets_size_values")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_pets")),
        sa.UniqueConstraint("name", name=op.f("uq_pets_name")),
    )
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("first_name", sa.String(50), nullable=False),
        sa.Column("last_name", sa.String(50), nullable=False),
        sa.Column("email", sa.String(50), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(5), server_default="user", nullable=False),
        sa.Column("pets", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("role IN ('user', 'admin')", name=op.f("ck_users_role_values")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
        sa.UniqueConstraint("email", name=op.f("uq_users_email")),
    )
    op.create_table(
        "adoptions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("pet_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column(
            "adoption_date",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("status", sa.String(8), server_default="pending", nullable=False),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name=op.f("ck_adoptions_status_values"),
        ),
        sa.ForeignKeyConstraint(
            ["pet_id"], ["pets.id"], name=op.f("fk_adoptions_pet_id_pets"), ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name=op.f("fk_adoptions_user_id_users"), ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_adoptions")),
    )
    op.create_index(op.f("ix_adoptions_pet_id"), "adoptions", ["pet_id"])
    op.create_index(op.f("ix_adoptions_user_id"), "adoptions", ["user_id"])


def downgrade() -> None:
    op.drop_index(op.f("ix_adoptions_user_id"), table_name="adoptions")
    op.drop_index(op.f("ix_adoptions_pet_id"), table_name="adoptions")
    op.drop_table("adoptions")
    op.drop_table("users")
    op.drop_table("pets")
