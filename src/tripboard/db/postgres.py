"""PostgreSQL store: connection management and trip board queries."""

import logging
from typing import Any

import psycopg
from psycopg import sql
from psycopg.rows import dict_row

from tripboard.config import Config
from tripboard.db.interface import TripStore
from tripboard.errors import StoreError
from tripboard.models.records import Activity, Attendee, Selection, Trip

logger = logging.getLogger(__name__)

ACTIVITY_COLUMNS = ("title", "description", "link", "image_url", "trip_id", "completed")

_SEED_TRIP_SQL = """
    INSERT INTO trip (id, title, description)
    VALUES (%s, %s, %s)
    ON CONFLICT (id) DO NOTHING
"""

_SAVE_TRIP_SQL = """
    INSERT INTO trip (id, title, description)
    VALUES (%s, %s, %s)
    ON CONFLICT (id) DO UPDATE
    SET title = EXCLUDED.title, description = EXCLUDED.description
    RETURNING *
"""

_INSERT_ACTIVITY_SQL = """
    INSERT INTO activities (title, description, link, image_url, trip_id, completed)
    VALUES (%(title)s, %(description)s, %(link)s, %(image_url)s, %(trip_id)s, %(completed)s)
    RETURNING *
"""

_UPSERT_SELECTION_SQL = """
    INSERT INTO selections (attendee_id, activity_id, selected)
    VALUES (%s, %s, %s)
    ON CONFLICT (attendee_id, activity_id) DO UPDATE
    SET selected = EXCLUDED.selected
    RETURNING *
"""


class PostgresTripStore(TripStore):
    def __init__(self, config: Config) -> None:
        self._config = config
        self._conn: psycopg.Connection[dict[str, Any]] | None = None

    def connect(self) -> None:
        try:
            self._conn = psycopg.connect(
                self._config.database_url,
                password=self._config.database_password,
                autocommit=True,
                row_factory=dict_row,
            )
        except psycopg.Error as e:
            raise StoreError(str(e)) from e
        logger.info("Connected to trip board database")

    def disconnect(self) -> None:
        if self._conn and not self._conn.closed:
            self._conn.close()
        self._conn = None

    def _connection(self) -> psycopg.Connection[dict[str, Any]]:
        """Return the active connection, opening one on first use or after a drop."""
        if self._conn is None or self._conn.closed:
            self.connect()
        if self._conn is None:
            raise StoreError("Trip board database connection is not open")
        return self._conn

    def _fetch_all(self, query: Any, params: Any = ()) -> list[dict[str, Any]]:
        conn = self._connection()
        try:
            with conn.cursor() as cur:
                cur.execute(query, params)
                return cur.fetchall() if cur.description else []
        except psycopg.Error as e:
            raise StoreError(str(e)) from e

    def _fetch_one(self, query: Any, params: Any = ()) -> dict[str, Any] | None:
        rows = self._fetch_all(query, params)
        return rows[0] if rows else None

    # ── Trip ──────────────────────────────────────────────────────────────

    def get_trip(self, trip_id: str) -> Trip | None:
        row = self._fetch_one("SELECT * FROM trip WHERE id = %s", (trip_id,))
        return Trip(**row) if row else None

    def seed_trip(self, trip_id: str, title: str, description: str) -> Trip:
        self._fetch_all(_SEED_TRIP_SQL, (trip_id, title, description))
        trip = self.get_trip(trip_id)
        if trip is None:
            raise StoreError(f"Trip {trip_id} could not be seeded")
        logger.info("Seeded trip %s", trip_id)
        return trip

    def save_trip(self, trip_id: str, title: str | None, description: str | None) -> Trip:
        row = self._fetch_one(_SAVE_TRIP_SQL, (trip_id, title, description))
        if row is None:
            raise StoreError(f"Trip {trip_id} could not be saved")
        return Trip(**row)

    # ── Activities ────────────────────────────────────────────────────────

    def list_activities(self) -> list[Activity]:
        rows = self._fetch_all("SELECT * FROM activities ORDER BY created_at ASC")
        return [Activity(**row) for row in rows]

    def create_activity(self, fields: dict[str, Any]) -> Activity:
        params = {column: fields.get(column) for column in ACTIVITY_COLUMNS}
        params["completed"] = bool(params["completed"])
        row = self._fetch_one(_INSERT_ACTIVITY_SQL, params)
        if row is None:
            raise StoreError("Activity insert returned no row")
        return Activity(**row)

    def update_activity(self, activity_id: str, changes: dict[str, Any]) -> Activity:
        unknown = set(changes) - set(ACTIVITY_COLUMNS)
        if unknown:
            raise ValueError(f"Unknown activity columns: {sorted(unknown)}")

        if changes:
            assignments = sql.SQL(", ").join(
                sql.SQL("{} = {}").format(sql.Identifier(column), sql.Placeholder(column)) for column in changes
            )
            query = sql.SQL("UPDATE activities SET {} WHERE id = {} RETURNING *").format(
                assignments, sql.Placeholder("id")
            )
            row = self._fetch_one(query, {**changes, "id": activity_id})
        else:
            row = self._fetch_one("SELECT * FROM activities WHERE id = %(id)s", {"id": activity_id})

        if row is None:
            raise StoreError(f"No activity with id {activity_id}")
        return Activity(**row)

    def delete_activity(self, activity_id: str) -> None:
        removed = self._delete_with_selections("activities", "activity_id", activity_id)
        logger.info("Deleted activity %s with %d selections", activity_id, removed)

    # ── Attendees ─────────────────────────────────────────────────────────

    def list_attendees(self) -> list[Attendee]:
        rows = self._fetch_all("SELECT * FROM attendees ORDER BY created_at ASC")
        return [Attendee(**row) for row in rows]

    def create_attendee(self, name: str) -> Attendee:
        row = self._fetch_one("INSERT INTO attendees (name) VALUES (%s) RETURNING *", (name,))
        if row is None:
            raise StoreError("Attendee insert returned no row")
        return Attendee(**row)

    def update_attendee(self, attendee_id: str, name: str) -> Attendee:
        row = self._fetch_one("UPDATE attendees SET name = %s WHERE id = %s RETURNING *", (name, attendee_id))
        if row is None:
            raise StoreError(f"No attendee with id {attendee_id}")
        return Attendee(**row)

    def delete_attendee(self, attendee_id: str) -> None:
        removed = self._delete_with_selections("attendees", "attendee_id", attendee_id)
        logger.info("Deleted attendee %s with %d selections", attendee_id, removed)

    # ── Selections ────────────────────────────────────────────────────────

    def list_selections(self) -> list[Selection]:
        return [Selection(**row) for row in self._fetch_all("SELECT * FROM selections")]

    def upsert_selection(self, attendee_id: str, activity_id: str, selected: bool) -> Selection:
        row = self._fetch_one(_UPSERT_SELECTION_SQL, (attendee_id, activity_id, selected))
        if row is None:
            raise StoreError("Selection upsert returned no row")
        return Selection(**row)

    def _delete_with_selections(self, table: str, selection_column: str, row_id: str) -> int:
        """Delete a row and the selections pointing at it in a single transaction."""
        conn = self._connection()
        try:
            with conn.transaction():
                with conn.cursor() as cur:
                    cur.execute(
                        sql.SQL("DELETE FROM selections WHERE {} = %s").format(sql.Identifier(selection_column)),
                        (row_id,),
                    )
                    removed = cur.rowcount
                    cur.execute(sql.SQL("DELETE FROM {} WHERE id = %s").format(sql.Identifier(table)), (row_id,))
        except psycopg.Error as e:
            raise StoreError(str(e)) from e
        return removed

    def __enter__(self) -> "PostgresTripStore":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
