"""Module entrypoint for the mock server.

Configuration (environment):
- PORT               listening port (default 8080)
- SM_MOCK_HOST       bind address (default 0.0.0.0)
- SM_MOCK_LOG_LEVEL  uvicorn/root log level (default info)
"""

from __future__ import annotations

import logging
import os

import uvicorn


log = logging.getLogger("sm_mock")


def _port(value: str | None) -> int:
    raw = (value or "").strip() or "8080"
    port = int(raw)
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {raw}")
    return port


def main() -> None:
    host = os.getenv("SM_MOCK_HOST", "0.0.0.0")
    port = _port(os.getenv("PORT"))
    log_level = os.getenv("SM_MOCK_LOG_LEVEL", "info").lower()

    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log.info("Starting Service Manager Mock V1 on %s:%s", host, port)

    uvicorn.run(
        "sm_mock.server:app",
        host=host,
        port=port,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
