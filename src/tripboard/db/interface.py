from abc import ABC, abstractmethod
from typing import Any

from tripboard.models.records import Activity, Attendee, Selection, Trip


class TripStore(ABC):
    """Persistence operations the gateway needs. One call is one logical store operation."""

    @abstractmethod
    def get_trip(self, trip_id: str) -> Trip | None: ...

    @abstractmethod
    def seed_trip(self, trip_id: str, title: str, description: str) -> Trip: ...

    @abstractmethod
    def save_trip(self, trip_id: str, title: str | None, description: str | None) -> Trip: ...

    @abstractmethod
    def list_activities(self) -> list[Activity]: ...

    @abstractmethod
    def create_activity(self, fields: dict[str, Any]) -> Activity: ...

    @abstractmethod
    def update_activity(self, activity_id: str, changes: dict[str, Any]) -> Activity: ...

    @abstractmethod
    def delete_activity(self, activity_id: str) -> None: ...

    @abstractmethod
    def list_attendees(self) -> list[Attendee]: ...

    @abstractmethod
    def create_attendee(self, name: str) -> Attendee: ...

    @abstractmethod
    def update_attendee(self, attendee_id: str, name: str) -> Attendee: ...

    @abstractmethod
    def delete_attendee(self, attendee_id: str) -> None: ...

    @abstractmethod
    def list_selections(self) -> list[Selection]: ...

    @abstractmethod
    def upsert_selection(self, attendee_id: str, activity_id: str, selected: bool) -> Selection: ...
