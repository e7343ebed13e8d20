"""Synthetic resource generation.

Three entry points, one per way a handler needs a record:
- sample(kind): canonical sample with fresh identity and timestamps
- from_payload(kind, raw): client payload decoded onto the shape, then stamped
- fetch(kind, resource_id): sample whose identity is the caller's id verbatim

Identity/timestamp fields supplied by the client are always overwritten.
"""

from __future__ import annotations

import json
from dataclasses import fields, replace
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import PayloadDecodeError
from .models import Resource, ResourceKind
from .versioning import new_id, now_utc


@lru_cache(maxsize=None)
def _adapter(model: type[Resource]) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def _describe(exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = str(err.get("msg", "invalid value"))
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or str(exc)


def _stamp(kind: ResourceKind, record: Resource, *, resource_id: str | None = None) -> Resource:
    now = now_utc()
    changes: dict[str, Any] = {
        "id": resource_id if resource_id is not None else new_id(),
        "created_at": now,
    }
    if kind.has_updated_at:
        changes["updated_at"] = now
    return replace(record, **changes)


class _Pairs(list):
    """Object members in document order, duplicates kept."""


def _normalize(kind: ResourceKind, document: Any) -> Any:
    """Map a decoded document onto the kind's field names.

    Keys match exactly first, then case-insensitively; a later key for the
    same field wins. null values leave the field at its empty default, and a
    top-level null is an empty object.
    """

    if document is None:
        return {}
    if not isinstance(document, _Pairs):
        return document

    names = [f.name for f in fields(kind.model)]
    folded = {name.casefold(): name for name in names}
    out: dict[str, Any] = {}
    for key, value in document:
        name = key if key in names else folded.get(key.casefold())
        if name is None or value is None:
            continue
        out[name] = value
    return out


def decode(kind: ResourceKind, raw: bytes | str) -> Resource:
    """Decode a JSON document onto the kind's shape.

    Types are checked strictly; unknown fields are ignored and omitted fields
    take their empty defaults.
    """

    try:
        document = json.loads(raw, object_pairs_hook=_Pairs)
    except ValueError as exc:
        raise PayloadDecodeError(kind.name, f"Invalid JSON: {exc}") from exc

    try:
        # Re-encoded so timestamps validate as JSON strings in strict mode.
        return _adapter(kind.model).validate_json(json.dumps(_normalize(kind, document)), strict=True)
    except ValidationError as exc:
        raise PayloadDecodeError(kind.name, _describe(exc)) from exc


def sample(kind: ResourceKind) -> Resource:
    return _stamp(kind, kind.model(**kind.sample_fields()))


def from_payload(kind: ResourceKind, raw: bytes | str) -> Resource:
    return _stamp(kind, decode(kind, raw))


def fetch(kind: ResourceKind, resource_id: str) -> Resource:
    # No lookup: every id "exists".
    return _stamp(kind, kind.model(**kind.sample_fields()), resource_id=resource_id)
