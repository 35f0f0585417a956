"""Pydantic models for rows returned by the store."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class Trip(BaseModel):
    id: UUID
    title: str | None = None
    description: str | None = None
    created_at: datetime | None = None


class Attendee(BaseModel):
    id: UUID
    name: str
    created_at: datetime | None = None


class Activity(BaseModel):
    id: UUID
    title: str | None = None
    description: str | None = None
    link: str | None = None
    image_url: str | None = None
    trip_id: UUID | None = None
    completed: bool = False
    created_at: datetime | None = None


class Selection(BaseModel):
    id: UUID | None = None
    attendee_id: UUID
    activity_id: UUID
    selected: bool
    created_at: datetime | None = None
