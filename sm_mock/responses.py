"""Response envelope helpers.

Wire shapes:
  - list:     {"items": [...], "total_items": <len(items)>}
  - single:   the record itself, unwrapped
  - error:    {"error": <short message>, "description": <detail>}

Every handler writes through respond(); a body that cannot be serialized is
replaced by a generic 500 error envelope rather than sent half-written.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from fastapi.responses import JSONResponse

from .errors import INTERNAL_ERROR, ErrorCode
from .models import JsonObject, Resource


log = logging.getLogger("sm_mock.responses")


def _to_json(value: Any) -> Any:
    if isinstance(value, Resource):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {k: _to_json(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_to_json(v) for v in value]
    return value


def list_envelope(items: Iterable[Resource | JsonObject]) -> JsonObject:
    """Build a list envelope; total_items is always derived from items."""

    materialized = list(items)
    return {"items": materialized, "total_items": len(materialized)}


def error_envelope(code: ErrorCode, *, description: str | None = None) -> JsonObject:
    return code.as_error(description=description)


def respond(payload: Resource | Mapping[str, Any], status_code: int = 200) -> JSONResponse:
    """Serialize payload as a JSON response."""

    try:
        # JSONResponse renders eagerly (json.dumps, allow_nan=False).
        return JSONResponse(_to_json(payload), status_code=status_code)
    except (TypeError, ValueError):
        log.exception("failed to serialize response body (status=%s)", status_code)
        return JSONResponse(error_envelope(INTERNAL_ERROR), status_code=500)


def respond_error(code: ErrorCode, status_code: int, *, description: str | None = None) -> JSONResponse:
    return respond(error_envelope(code, description=description), status_code=status_code)
