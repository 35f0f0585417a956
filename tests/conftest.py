"""Shared test fixtures for Trip Board."""

import base64
import json
import sys
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from tripboard.db.interface import TripStore  # noqa: E402
from tripboard.errors import StoreError  # noqa: E402
from tripboard.models.records import Activity, Attendee, Selection, Trip  # noqa: E402


class InMemoryTripStore(TripStore):
    """Dict-backed TripStore with the same constraints the database enforces.

    Names in ``fail_on`` make the matching method raise StoreError, and every
    call is recorded in ``calls``.
    """

    def __init__(self) -> None:
        self.trips: dict[str, Trip] = {}
        self.activities: dict[str, Activity] = {}
        self.attendees: dict[str, Attendee] = {}
        self.selections: dict[tuple[str, str], Selection] = {}
        self.fail_on: set[str] = set()
        self.calls: list[str] = []
        self._clock = datetime(2026, 7, 1, tzinfo=timezone.utc)

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail_on:
            raise StoreError(f"{name} failed")

    def _now(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def get_trip(self, trip_id):
        self._record("get_trip")
        return self.trips.get(trip_id)

    def seed_trip(self, trip_id, title, description):
        self._record("seed_trip")
        self.trips.setdefault(
            trip_id, Trip(id=trip_id, title=title, description=description, created_at=self._now())
        )
        return self.trips[trip_id]

    def save_trip(self, trip_id, title, description):
        self._record("save_trip")
        existing = self.trips.get(trip_id)
        created_at = existing.created_at if existing else self._now()
        self.trips[trip_id] = Trip(id=trip_id, title=title, description=description, created_at=created_at)
        return self.trips[trip_id]

    def list_activities(self):
        self._record("list_activities")
        return sorted(self.activities.values(), key=lambda a: a.created_at)

    def create_activity(self, fields):
        self._record("create_activity")
        activity = Activity(id=uuid.uuid4(), created_at=self._now(), **fields)
        self.activities[str(activity.id)] = activity
        return activity

    def update_activity(self, activity_id, changes):
        self._record("update_activity")
        if activity_id not in self.activities:
            raise StoreError(f"No activity with id {activity_id}")
        updated = self.activities[activity_id].model_copy(update=changes)
        self.activities[activity_id] = updated
        return updated

    def delete_activity(self, activity_id):
        self._record("delete_activity")
        self.selections = {k: v for k, v in self.selections.items() if k[1] != activity_id}
        self.activities.pop(activity_id, None)

    def list_attendees(self):
        self._record("list_attendees")
        return sorted(self.attendees.values(), key=lambda a: a.created_at)

    def create_attendee(self, name):
        self._record("create_attendee")
        attendee = Attendee(id=uuid.uuid4(), name=name, created_at=self._now())
        self.attendees[str(attendee.id)] = attendee
        return attendee

    def update_attendee(self, attendee_id, name):
        self._record("update_attendee")
        if attendee_id not in self.attendees:
            raise StoreError(f"No attendee with id {attendee_id}")
        self.attendees[attendee_id] = self.attendees[attendee_id].model_copy(update={"name": name})
        return self.attendees[attendee_id]

    def delete_attendee(self, attendee_id):
        self._record("delete_attendee")
        self.selections = {k: v for k, v in self.selections.items() if k[0] != attendee_id}
        self.attendees.pop(attendee_id, None)

    def list_selections(self):
        self._record("list_selections")
        return list(self.selections.values())

    def upsert_selection(self, attendee_id, activity_id, selected):
        self._record("upsert_selection")
        key = (attendee_id, activity_id)
        existing = self.selections.get(key)
        if existing:
            self.selections[key] = existing.model_copy(update={"selected": selected})
        else:
            self.selections[key] = Selection(
                id=uuid.uuid4(),
                attendee_id=attendee_id,
                activity_id=activity_id,
                selected=selected,
                created_at=self._now(),
            )
        return self.selections[key]


@pytest.fixture
def store():
    """Provide an empty in-memory store."""
    return InMemoryTripStore()


@pytest.fixture
def make_event():
    """Build API Gateway REST proxy events."""

    def _make_event(method: str, path: str, body: Any = None, raw_body: str | None = None, b64: bool = False):
        event: dict[str, Any] = {"httpMethod": method, "path": f"/api{path}", "body": None}
        if raw_body is not None:
            event["body"] = raw_body
        elif body is not None:
            event["body"] = json.dumps(body)
        if b64 and event["body"] is not None:
            event["body"] = base64.b64encode(event["body"].encode()).decode()
            event["isBase64Encoded"] = True
        return event

    return _make_event


# PostgreSQL fixtures
@pytest.fixture
def pg_connection():
    """Provide a PostgreSQL connection for integration tests."""
    import psycopg
    from psycopg.rows import dict_row

    from tripboard.config import get_config

    config = get_config()
    if not config.store_configured:
        pytest.skip("DATABASE_URL / DATABASE_PASSWORD not set")

    conn = psycopg.connect(config.database_url, password=config.database_password, row_factory=dict_row)
    yield conn

    # Rollback any uncommitted changes
    conn.rollback()
    conn.close()
