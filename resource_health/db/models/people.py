"""ORM models for lab members and projects."""

from typing import Optional

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from resource_health.db.base import Base, TimestampMixin


class PersonRow(Base, TimestampMixin):
    """Lab member profile. role is a free-form label."""

    __tablename__ = "people"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(128), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(128), nullable=False, default="")
    email: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    role: Mapped[str] = mapped_column(String(64), nullable=False, default="", index=True)


class ProjectRow(Base, TimestampMixin):
    """Master project with the funding accounts it may charge."""

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False, default="")
    account_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
