"""End-to-end smoke test for the local development environment."""

import json

import pytest

from tripboard.config import get_config
from tripboard.db import PostgresTripStore
from tripboard.services.gateway import route_request


def _call(store, method, path, body=None):
    event = {"httpMethod": method, "path": f"/api{path}", "body": json.dumps(body) if body is not None else None}
    result = route_request(event, store, trip_id=get_config().trip_id)
    return result["statusCode"], json.loads(result["body"])


@pytest.mark.integration
def test_full_request_flow(pg_connection):
    """Drive every resource through the gateway against the real database."""
    with PostgresTripStore(get_config()) as store:
        status, trip = _call(store, "GET", "/trip")
        assert status == 200
        assert trip["id"] == get_config().trip_id

        status, attendee = _call(store, "POST", "/attendees", {"name": "Smoke Tester"})
        assert status == 200

        status, activity = _call(store, "POST", "/activities", {"title": "Smoke hike", "trip_id": trip["id"]})
        assert status == 200
        assert activity["trip_id"] == trip["id"]

        pair = {"attendee_id": attendee["id"], "activity_id": activity["id"]}
        _call(store, "POST", "/selections", {**pair, "selected": True})
        status, selection = _call(store, "POST", "/selections", {**pair, "selected": False})
        assert status == 200
        assert selection["selected"] is False

        status, body = _call(store, "DELETE", f"/activities/{activity['id']}")
        assert (status, body) == (200, {"ok": True})

        _, selections = _call(store, "GET", "/selections")
        assert not [s for s in selections if s["activity_id"] == activity["id"]]

        status, body = _call(store, "DELETE", f"/attendees/{attendee['id']}")
        assert (status, body) == (200, {"ok": True})
