"""Resource shapes served by the mock.

Records are plain dataclasses; they are built inside a single request and
discarded once the response is written. Field names are the wire names.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Callable

from .versioning import new_id


JsonObject = dict[str, Any]


@dataclass(slots=True)
class Resource:
    id: str = ""

    def to_dict(self) -> JsonObject:
        out: JsonObject = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            out[f.name] = value
        return out


@dataclass(slots=True)
class Offering(Resource):
    name: str = ""
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(slots=True)
class Plan(Resource):
    name: str = ""
    description: str = ""
    free: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(slots=True)
class Instance(Resource):
    name: str = ""
    service_id: str = ""
    plan_id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(slots=True)
class Binding(Resource):
    # Point-in-time grant: no updated_at.
    instance_id: str = ""
    service_id: str = ""
    plan_id: str = ""
    created_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class ResourceKind:
    """Describes one resource kind exposed under /v1/<collection>."""

    name: str
    collection: str
    model: type[Resource]
    sample_fields: Callable[[], JsonObject]

    @property
    def has_updated_at(self) -> bool:
        return any(f.name == "updated_at" for f in fields(self.model))


OFFERING = ResourceKind(
    name="offering",
    collection="service_offerings",
    model=Offering,
    sample_fields=lambda: {"name": "sample-service", "description": "A sample service offering"},
)

PLAN = ResourceKind(
    name="plan",
    collection="service_plans",
    model=Plan,
    sample_fields=lambda: {"name": "basic-plan", "description": "Basic service plan", "free": True},
)

INSTANCE = ResourceKind(
    name="instance",
    collection="service_instances",
    model=Instance,
    sample_fields=lambda: {"name": "test-instance", "service_id": new_id(), "plan_id": new_id()},
)

BINDING = ResourceKind(
    name="binding",
    collection="service_bindings",
    model=Binding,
    sample_fields=lambda: {"instance_id": new_id(), "service_id": new_id(), "plan_id": new_id()},
)

# Registration order of the /v1 surface.
RESOURCE_KINDS: tuple[ResourceKind, ...] = (BINDING, OFFERING, PLAN, INSTANCE)
