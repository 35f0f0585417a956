"""
Database ORM models and clients for Trip Board.

Importing this package registers all models on Base.metadata,
which scripts/create_local_tables.py needs to build the schema.
"""

from tripboard.db.interface import TripStore
from tripboard.db.postgres import PostgresTripStore
from tripboard.db.schemas.activity import ActivityRow
from tripboard.db.schemas.attendee import AttendeeRow
from tripboard.db.schemas.base import Base
from tripboard.db.schemas.selection import SelectionRow
from tripboard.db.schemas.trip import TripRow

__all__ = [
    "ActivityRow",
    "AttendeeRow",
    "Base",
    "PostgresTripStore",
    "SelectionRow",
    "TripRow",
    "TripStore",
]
