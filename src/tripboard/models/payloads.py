"""Request payload shapes accepted by the gateway.

Create and replace payloads treat empty values as null. Update payloads treat
null as "leave unchanged", so only the fields a caller actually sent are
written.
"""

from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, BeforeValidator


def _blank_to_none(value: Any) -> Any:
    return value or None


def _truthy(value: Any) -> bool:
    return bool(value)


def _truthy_or_none(value: Any) -> bool | None:
    return None if value is None else bool(value)


def _strip_to_none(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip() or None
    return value


OptionalText = Annotated[str | None, BeforeValidator(_blank_to_none)]
OptionalId = Annotated[UUID | None, BeforeValidator(_blank_to_none)]
Flag = Annotated[bool, BeforeValidator(_truthy)]


class TripUpdate(BaseModel):
    title: OptionalText = None
    description: OptionalText = None


class ActivityCreate(BaseModel):
    title: OptionalText = None
    description: OptionalText = None
    link: OptionalText = None
    image_url: OptionalText = None
    trip_id: OptionalId = None
    completed: Flag = False


class ActivityUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    link: str | None = None
    image_url: str | None = None
    trip_id: UUID | None = None
    completed: Annotated[bool | None, BeforeValidator(_truthy_or_none)] = None

    def changes(self) -> dict[str, Any]:
        """Fields to write; absent and null fields are left untouched."""
        return self.model_dump(exclude_none=True)


class AttendeeWrite(BaseModel):
    name: Annotated[str | None, BeforeValidator(_strip_to_none)] = None


class SelectionUpsert(BaseModel):
    attendee_id: OptionalId = None
    activity_id: OptionalId = None
    selected: Flag = False
