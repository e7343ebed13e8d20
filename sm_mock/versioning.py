"""Small helpers for identities and timestamps.

Identities rely on randomness only (no counters, no shared state), so they
are safe to call from any number of concurrent requests.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Return a random 128-bit token in canonical UUID form."""

    return str(uuid4())
