"""SQLAlchemy models.

Define all ORM models here. They must inherit from Base so that
Alembic's autogenerate can detect them.

Every model sets ``eager_defaults`` so server-generated timestamps come back
with RETURNING at flush time; reading an expired attribute afterwards would
need a lazy load, which async sessions refuse.
"""

import uuid
from datetime import date, datetime

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    String,
    Uuid,
    false,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from petadopt.db.session import Base

PET_GENDERS = ("male", "female")
PET_SIZES = ("small", "medium", "large")
USER_ROLES = ("user", "admin")
ADOPTION_STATUSES = ("pending", "approved", "rejected")


def _in(column: str, values: tuple[str, ...]) -> str:
    quoted = ", ".join(f"'{value}'" for value in values)
    return f"{column} IN ({quoted})"


class Pet(Base):
    __tablename__ = "pets"
    __table_args__ = (
        CheckConstraint(_in("gender", PET_GENDERS), name="gender_values"),
        CheckConstraint(_in("size", PET_SIZES), name="size_values"),
    )
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(20), unique=True)
    birth_date: Mapped[date] = mapped_column(Date, server_default=func.current_date())
    breed: Mapped[str] = mapped_column(String(15))
    gender: Mapped[str] = mapped_column(String(6))
    size: Mapped[str] = mapped_column(String(6))
    description: Mapped[str] = mapped_column(String(500))
    is_adopted: Mapped[bool] = mapped_column(default=False, server_default=false())
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class User(Base):
    __tablename__ = "users"
    __table_args__ = (CheckConstraint(_in("role", USER_ROLES), name="role_values"),)
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(String(50))
    last_name: Mapped[str] = mapped_column(String(50))
    email: Mapped[str] = mapped_column(String(50), unique=True)
    # passlib hash, never the raw password
    password: Mapped[str] = mapped_column(String(255))
    role: Mapped[str] = mapped_column(String(5), default="user", server_default="user")
    # Ordered pet ids (as strings), written only by the adoption workflow.
    # Always reassign a new list: JSON columns don't track in-place mutation.
    pets: Mapped[list[str]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class Adoption(Base):
    __tablename__ = "adoptions"
    __table_args__ = (CheckConstraint(_in("status", ADOPTION_STATUSES), name="status_values"),)
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    pet_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("pets.id", ondelete="RESTRICT"), index=True
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT"), index=True
    )
    adoption_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    status: Mapped[str] = mapped_column(String(8), default="pending", server_default="pending")
