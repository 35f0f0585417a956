"""HTTP client for the trip board API.

One method per logical operation; each performs exactly one request and
returns the parsed JSON body. Non-success statuses raise ApiRequestError.
No retries, no caching.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from tripboard.config import get_config
from tripboard.errors import ApiRequestError

logger = logging.getLogger(__name__)


def _escape(resource_id: Any) -> str:
    return quote(str(resource_id), safe="")


class TripApiClient:
    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        if base_url is None:
            base_url = get_config().api_base_url
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def _request(self, method: str, path: str, body: Any = None) -> Any:
        url = f"{self._base_url}{path}"
        response = self._client.request(
            method,
            url,
            headers={"Content-Type": "application/json"},
            json=body,
        )
        if not response.is_success:
            logger.warning("%s %s returned %d", method, url, response.status_code)
            raise ApiRequestError(response.status_code)
        return response.json()

    # Activities
    def list_activities(self) -> Any:
        return self._request("GET", "/activities")

    def upsert_activity(self, obj: dict[str, Any]) -> Any:
        if obj.get("id"):
            return self._request("PUT", f"/activities/{_escape(obj['id'])}", obj)
        return self._request("POST", "/activities", obj)

    def delete_activity(self, activity_id: Any) -> Any:
        return self._request("DELETE", f"/activities/{_escape(activity_id)}")

    # Trip
    def get_trip(self) -> Any:
        return self._request("GET", "/trip")

    def save_trip(self, obj: dict[str, Any]) -> Any:
        return self._request("PUT", "/trip", obj)

    # Selections
    def get_selections(self) -> Any:
        return self._request("GET", "/selections")

    def toggle_selection(self, payload: dict[str, Any]) -> Any:
        return self._request("POST", "/selections", payload)

    # Attendees
    def get_attendees(self) -> Any:
        return self._request("GET", "/attendees")

    def save_attendee(self, obj: dict[str, Any]) -> Any:
        if obj.get("id"):
            return self._request("PUT", f"/attendees/{_escape(obj['id'])}", obj)
        return self._request("POST", "/attendees", obj)

    def delete_attendee(self, attendee_id: Any) -> Any:
        return self._request("DELETE", f"/attendees/{_escape(attendee_id)}")

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "TripApiClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
