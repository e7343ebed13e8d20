"""Error catalog for the mock server.

Every error response uses the same envelope: {"error": ..., "description": ...}.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ErrorCode:
    """A stable error message plus its default description."""

    message: str
    default_description: str

    def as_error(self, *, description: str | None = None) -> dict[str, str]:
        return {
            "error": self.message,
            "description": description if description is not None else self.default_description,
        }


# Client sent a create body that does not decode onto the resource shape.
INVALID_PAYLOAD = ErrorCode(
    message="Invalid request payload",
    default_description="Request body could not be decoded.",
)

# Never carries internal detail.
INTERNAL_ERROR = ErrorCode(
    message="Internal Server Error",
    default_description="The server failed to produce a response.",
)


class PayloadDecodeError(ValueError):
    """Raised when a create payload cannot be mapped onto a resource shape."""

    def __init__(self, kind: str, detail: str) -> None:
        super().__init__(detail)
        self.kind = kind
        self.detail = detail
