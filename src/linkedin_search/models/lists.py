# ABOUTME: SQLModel tables for lists of saved search results and saved filters.
# ABOUTME: Lists belong to an account; profiles and accounts are unique per list by LinkedIn id.

from datetime import UTC, datetime
from typing import Annotated, Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel


def _now() -> datetime:
    return datetime.now(UTC)


class CrmList(SQLModel, table=True):
    """A named list that search results are saved into."""

    __tablename__ = "crm_lists"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    account_id: Annotated[str, Field(index=True, description="Provider account owning the list")]
    name: str
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class ListProfile(SQLModel, table=True):
    """A person saved into a list."""

    __tablename__ = "crm_profiles"
    __table_args__ = (UniqueConstraint("list_id", "linkedin_id"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    list_id: UUID = Field(foreign_key="crm_lists.id", index=True)
    linkedin_id: Annotated[str, Field(index=True, description="Provider id of the person")]
    name: str = ""
    headline: str = ""
    location: str = ""
    profile_url: str = ""
    created_at: datetime = Field(default_factory=_now)


class ListAccount(SQLModel, table=True):
    """A company saved into a list."""

    __tablename__ = "crm_accounts"
    __table_args__ = (UniqueConstraint("list_id", "linkedin_id"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    list_id: UUID = Field(foreign_key="crm_lists.id", index=True)
    linkedin_id: Annotated[str, Field(index=True, description="Provider id of the company")]
    name: str = ""
    summary: str = ""
    location: str = ""
    industry: str = ""
    followers_count: int = 0
    profile_url: str = ""
    logo: str = ""
    created_at: datetime = Field(default_factory=_now)


class SavedFilter(SQLModel, table=True):
    """A filter state stored under a name for reuse."""

    __tablename__ = "saved_filters"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    account_id: str = Field(index=True)
    name: str
    group_name: str | None = None
    filters: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=_now)
