"""Data models for family network."""

import uuid
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


def new_id() -> str:
    """Generate an opaque member/network identifier."""
    return uuid.uuid4().hex


class Member(BaseModel):
    """Person recorded within a family network."""

    id: str = Field(default_factory=new_id)
    name: str
    relationship: Optional[str] = None  # label shown on the member card, e.g. "Creator"
    email: Optional[str] = None
    phone: Optional[str] = None
    birthdate: Optional[date] = None
    photo: Optional[str] = None  # data URL, opaque here
    added_by: Optional[str] = None
    added_date: datetime = Field(default_factory=datetime.now)
    is_registered_user: bool = False

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class RelationshipRecord(BaseModel):
    """One directed relationship entry, as persisted."""

    from_id: str
    to_id: str
    relationship: str


class FamilyNetwork(BaseModel):
    """Snapshot of a family network handed to and from the network store."""

    id: str = Field(default_factory=new_id)
    name: str
    creator: str
    created_at: datetime = Field(default_factory=datetime.now)
    members: list[Member] = Field(default_factory=list)
    relationships: list[RelationshipRecord] = Field(default_factory=list)
