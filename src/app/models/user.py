"""University, user and client models."""

from datetime import datetime
from uuid import UUID, uuid7

from sqlmodel import Field, SQLModel

from src.app.models.base import utc_now
from src.app.models.enums import UserRole


class University(SQLModel, table=True):
    """University (tenant)."""

    __tablename__ = "universities"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    name: str = Field(max_length=255, index=True)
    slug: str = Field(max_length=100, unique=True, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    full_name: str = Field(max_length=100)
    role: str = Field(default=UserRole.STUDENT.value, max_length=20)
    university_id: UUID | None = Field(default=None, foreign_key="universities.id", index=True)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Client(SQLModel, table=True):
    """Client profile. A user can create projects only if they have one."""

    __tablename__ = "clients"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", unique=True, index=True)
    organization: str | None = Field(default=None, max_length=255)
    organization_logo_url: str | None = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
