"""
Pydantic models for Trip Board.
"""

from tripboard.models.payloads import (
    ActivityCreate,
    ActivityUpdate,
    AttendeeWrite,
    SelectionUpsert,
    TripUpdate,
)
from tripboard.models.records import Activity, Attendee, Selection, Trip

__all__ = [
    "Activity",
    "ActivityCreate",
    "ActivityUpdate",
    "Attendee",
    "AttendeeWrite",
    "Selection",
    "SelectionUpsert",
    "Trip",
    "TripUpdate",
]
