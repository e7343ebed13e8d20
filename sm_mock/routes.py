"""Route table for the /v1 resource surface.

Each resource kind contributes four routes: a collection template
(/v1/<collection>) for list/create and a singleton template
(/v1/<collection>/{id}) for fetch/delete. Templates of different kinds never
overlap, so registration order does not affect matching. Requests that match
nothing fall through to the framework's default not-found handling.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from fastapi import FastAPI

from .handlers.resources import (
    Handler,
    make_create_handler,
    make_delete_handler,
    make_fetch_handler,
    make_list_handler,
)
from .models import RESOURCE_KINDS, ResourceKind


log = logging.getLogger("sm_mock.routes")

API_PREFIX = "/v1"


@dataclass(frozen=True, slots=True)
class RouteSpec:
    method: str
    path: str
    handler: Handler
    kind: str


def collection_path(kind: ResourceKind) -> str:
    return f"{API_PREFIX}/{kind.collection}"


def singleton_path(kind: ResourceKind) -> str:
    return f"{collection_path(kind)}/{{id}}"


def routes_for(kind: ResourceKind) -> list[RouteSpec]:
    return [
        RouteSpec("GET", collection_path(kind), make_list_handler(kind), kind.name),
        RouteSpec("POST", collection_path(kind), make_create_handler(kind), kind.name),
        RouteSpec("GET", singleton_path(kind), make_fetch_handler(kind), kind.name),
        RouteSpec("DELETE", singleton_path(kind), make_delete_handler(kind), kind.name),
    ]


def build_routes(kinds: Iterable[ResourceKind] = RESOURCE_KINDS) -> list[RouteSpec]:
    out: list[RouteSpec] = []
    for kind in kinds:
        out.extend(routes_for(kind))
    return out


def register_routes(app: FastAPI, routes: Iterable[RouteSpec] | None = None) -> list[RouteSpec]:
    """Register routes on the app; a repeated (method, path) pair is an error."""

    seen: set[tuple[str, str]] = set()
    registered: list[RouteSpec] = []
    for route in build_routes() if routes is None else routes:
        key = (route.method.upper(), route.path)
        if key in seen:
            raise ValueError(f"route already registered: {key[0]} {key[1]}")
        seen.add(key)

        app.add_route(route.path, route.handler, methods=[key[0]])
        registered.append(route)
        log.debug("registered %s %s (%s)", key[0], route.path, route.kind)
    return registered
