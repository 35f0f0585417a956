"""Request router that maps API Gateway proxy events onto trip board store operations.

Each request resolves to exactly one route, and each route issues one logical
store operation. The store is passed in by the caller; ``None`` means the
database is not configured and every resource request fails with a 500.
"""

import logging
from typing import Any, Callable, NamedTuple, TypeVar
from uuid import UUID

import pydantic

from tripboard.config import DEFAULT_TRIP_ID
from tripboard.db.interface import TripStore
from tripboard.errors import ConfigurationError, RouteNotFoundError, TripBoardError, ValidationError
from tripboard.models.payloads import ActivityCreate, ActivityUpdate, AttendeeWrite, SelectionUpsert, TripUpdate
from tripboard.services.http import error_response, json_response, parse_body, preflight_response

logger = logging.getLogger(__name__)

SEED_TRIP_TITLE = "Family Fun Week"
SEED_TRIP_DESCRIPTION = "Pick what you want to do while we’re together!"

NOT_CONFIGURED_MESSAGE = "Database not configured. Set DATABASE_URL and DATABASE_PASSWORD."

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


class RouteContext(NamedTuple):
    resource_id: str | None
    body: dict[str, Any]
    trip_id: str


Route = Callable[[TripStore, RouteContext], Any]


def split_path(path: str, base_path: str) -> list[str]:
    """Strip the mount point and split the rest into resource segments.

    ``/api/activities/`` yields ``["activities", ""]`` so a trailing slash
    reads as an empty identifier.
    """
    prefix = base_path.rstrip("/")
    if prefix and (path == prefix or path.startswith(prefix + "/")):
        path = path[len(prefix):]
    if path.startswith("/"):
        path = path[1:]
    return path.split("/")


def _describe(error: pydantic.ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}" for detail in error.errors()
    )


def _validate(model: type[ModelT], body: dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(body)
    except pydantic.ValidationError as e:
        raise ValidationError(_describe(e)) from e


def _require_id(ctx: RouteContext) -> str:
    if not ctx.resource_id:
        raise ValidationError("id required")
    try:
        return str(UUID(ctx.resource_id))
    except ValueError as e:
        raise ValidationError("id must be a UUID") from e


# ── trip ──────────────────────────────────────────────────────────────────


def get_trip(store: TripStore, ctx: RouteContext) -> Any:
    trip = store.get_trip(ctx.trip_id)
    if trip is None:
        trip = store.seed_trip(ctx.trip_id, SEED_TRIP_TITLE, SEED_TRIP_DESCRIPTION)
    return trip


def save_trip(store: TripStore, ctx: RouteContext) -> Any:
    payload = _validate(TripUpdate, ctx.body)
    return store.save_trip(ctx.trip_id, payload.title, payload.description)


# ── activities ────────────────────────────────────────────────────────────


def list_activities(store: TripStore, ctx: RouteContext) -> Any:
    return store.list_activities()


def create_activity(store: TripStore, ctx: RouteContext) -> Any:
    payload = _validate(ActivityCreate, ctx.body)
    return store.create_activity(payload.model_dump())


def update_activity(store: TripStore, ctx: RouteContext) -> Any:
    activity_id = _require_id(ctx)
    payload = _validate(ActivityUpdate, ctx.body)
    return store.update_activity(activity_id, payload.changes())


def delete_activity(store: TripStore, ctx: RouteContext) -> Any:
    store.delete_activity(_require_id(ctx))
    return {"ok": True}


# ── attendees ─────────────────────────────────────────────────────────────


def list_attendees(store: TripStore, ctx: RouteContext) -> Any:
    return store.list_attendees()


def _require_name(body: dict[str, Any]) -> str:
    payload = _validate(AttendeeWrite, body)
    if not payload.name:
        raise ValidationError("name required")
    return payload.name


def create_attendee(store: TripStore, ctx: RouteContext) -> Any:
    return store.create_attendee(_require_name(ctx.body))


def update_attendee(store: TripStore, ctx: RouteContext) -> Any:
    attendee_id = _require_id(ctx)
    return store.update_attendee(attendee_id, _require_name(ctx.body))


def delete_attendee(store: TripStore, ctx: RouteContext) -> Any:
    store.delete_attendee(_require_id(ctx))
    return {"ok": True}


# ── selections ────────────────────────────────────────────────────────────


def list_selections(store: TripStore, ctx: RouteContext) -> Any:
    return store.list_selections()


def upsert_selection(store: TripStore, ctx: RouteContext) -> Any:
    payload = _validate(SelectionUpsert, ctx.body)
    if payload.attendee_id is None or payload.activity_id is None:
        raise ValidationError("attendee_id and activity_id required")
    return store.upsert_selection(str(payload.attendee_id), str(payload.activity_id), payload.selected)


# (resource, method, segment count) -> route
ROUTES: dict[tuple[str, str, int], Route] = {
    ("trip", "GET", 1): get_trip,
    ("trip", "PUT", 1): save_trip,
    ("activities", "GET", 1): list_activities,
    ("activities", "POST", 1): create_activity,
    ("activities", "PUT", 2): update_activity,
    ("activities", "DELETE", 2): delete_activity,
    ("attendees", "GET", 1): list_attendees,
    ("attendees", "POST", 1): create_attendee,
    ("attendees", "PUT", 2): update_attendee,
    ("attendees", "DELETE", 2): delete_attendee,
    ("selections", "GET", 1): list_selections,
    ("selections", "POST", 1): upsert_selection,
}

RESOURCES = frozenset(resource for resource, _, _ in ROUTES)


def route_request(
    event: dict[str, Any],
    store: TripStore | None,
    base_path: str = "/api",
    trip_id: str = DEFAULT_TRIP_ID,
) -> dict[str, Any]:
    """Handle one API Gateway proxy event and return the proxy response."""
    method = (event.get("httpMethod") or "").upper()
    path = event.get("path") or ""

    if method == "OPTIONS":
        return preflight_response()

    segments = split_path(path, base_path)
    resource = segments[0]

    try:
        if resource not in RESOURCES:
            raise RouteNotFoundError()
        if store is None:
            raise ConfigurationError(NOT_CONFIGURED_MESSAGE)

        route = ROUTES.get((resource, method, len(segments)))
        if route is None:
            raise RouteNotFoundError()

        ctx = RouteContext(
            resource_id=segments[1] if len(segments) > 1 else None,
            body=parse_body(event),
            trip_id=trip_id,
        )
        result = route(store, ctx)
    except ValidationError as e:
        logger.info("%s %s rejected: %s", method, path, e.message)
        return error_response(e.status_code, e.message)
    except TripBoardError as e:
        if e.status_code >= 500:
            logger.error("%s %s failed: %s", method, path, e.message)
        return error_response(e.status_code, e.message)
    except Exception:
        logger.exception("Unhandled error for %s %s", method, path)
        return error_response(500, "Internal server error")

    logger.info("%s %s -> %d", method, path, 200)
    return json_response(200, result)
