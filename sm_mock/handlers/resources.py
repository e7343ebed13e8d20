"""Resource handlers.

Implements, for every resource kind:
- GET    /v1/<collection>        list (one generated sample)
- POST   /v1/<collection>        create (payload echoed back with identity)
- GET    /v1/<collection>/{id}   fetch (sample carrying the requested id)
- DELETE /v1/<collection>/{id}   delete (always 204)

Handlers keep no state between calls; each one is built per kind by a small
factory so all four kinds share the same behaviour.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from fastapi import Request, Response

from .. import generator
from ..errors import INVALID_PAYLOAD, PayloadDecodeError
from ..models import ResourceKind
from ..responses import list_envelope, respond, respond_error


log = logging.getLogger("sm_mock.handlers.resources")

Handler = Callable[[Request], Awaitable[Response]]


def make_list_handler(kind: ResourceKind) -> Handler:
    async def list_resources(request: Request) -> Response:
        return respond(list_envelope([generator.sample(kind)]), status_code=200)

    list_resources.__name__ = f"list_{kind.collection}"
    return list_resources


def make_create_handler(kind: ResourceKind) -> Handler:
    async def create_resource(request: Request) -> Response:
        body = await request.body()
        try:
            record = generator.from_payload(kind, body)
        except PayloadDecodeError as exc:
            log.debug("rejected %s payload: %s", kind.name, exc.detail)
            return respond_error(INVALID_PAYLOAD, 400, description=exc.detail)
        return respond(record, status_code=201)

    create_resource.__name__ = f"create_{kind.collection}"
    return create_resource


def make_fetch_handler(kind: ResourceKind) -> Handler:
    async def fetch_resource(request: Request) -> Response:
        resource_id = str(request.path_params.get("id") or "")
        return respond(generator.fetch(kind, resource_id), status_code=200)

    fetch_resource.__name__ = f"fetch_{kind.collection}"
    return fetch_resource


def make_delete_handler(kind: ResourceKind) -> Handler:
    async def delete_resource(request: Request) -> Response:
        return Response(status_code=204)

    delete_resource.__name__ = f"delete_{kind.collection}"
    return delete_resource
