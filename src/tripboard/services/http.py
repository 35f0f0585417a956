"""API Gateway proxy event helpers: response shaping and lenient body parsing."""

import base64
import binascii
import json
from typing import Any

from pydantic import BaseModel

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}

PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
}


def _to_jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, list):
        return [_to_jsonable(item) for item in data]
    return data


def json_response(status: int, data: Any, headers: dict[str, str] | None = None) -> dict[str, Any]:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json", **CORS_HEADERS, **(headers or {})},
        "body": json.dumps(_to_jsonable(data)),
    }


def error_response(status: int, message: str) -> dict[str, Any]:
    return json_response(status, {"error": message})


def preflight_response() -> dict[str, Any]:
    return {"statusCode": 200, "headers": dict(PREFLIGHT_HEADERS), "body": ""}


def parse_body(event: dict[str, Any]) -> dict[str, Any]:
    """Best-effort JSON body parse.

    A missing, undecodable or malformed body, or one whose JSON is not an
    object, is treated as an empty payload rather than rejected.
    """
    raw = event.get("body") or ""
    if event.get("isBase64Encoded") and raw:
        try:
            raw = base64.b64decode(raw).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return {}
    try:
        body = json.loads(raw or "{}")
    except (ValueError, TypeError):
        return {}
    return body if isinstance(body, dict) else {}
