"""HTTP application for the Service Manager mock.

- /health liveness probe
- /v1 resource routes (see routes.py)
- an exception guard so unexpected failures surface as the standard error
  envelope with HTTP 500 instead of a framework traceback page
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from . import __version__
from .errors import INTERNAL_ERROR
from .responses import respond_error
from .routes import register_routes


log = logging.getLogger("sm_mock.server")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Service Manager Mock V1",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        # "/v1/service_plans/" is not the collection route.
        redirect_slashes=False,
    )

    @app.middleware("http")
    async def _exception_guard(request: Request, call_next):
        try:
            response: Response = await call_next(request)
            return response
        except Exception:  # noqa: BLE001
            log.exception("unhandled error for %s %s", request.method, request.url.path)
            return respond_error(INTERNAL_ERROR, 500)

    @app.get("/health", response_class=PlainTextResponse)
    async def health() -> str:
        return "OK"

    register_routes(app)
    return app


app = create_app()
