"""Trip board HTTP API handler for the API Gateway REST proxy integration."""

import logging
from typing import Any

from tripboard.clients import get_trip_store
from tripboard.config import get_config
from tripboard.services.gateway import NOT_CONFIGURED_MESSAGE, route_request
from tripboard.services.http import error_response

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        config = get_config()
        store = get_trip_store()
    except Exception:
        logger.exception("Failed to resolve trip board configuration")
        return error_response(500, NOT_CONFIGURED_MESSAGE)
    return route_request(event, store, base_path=config.api_base_path, trip_id=config.trip_id)
