"""Response envelope shared by the HTTP and CLI surfaces.

Every outcome, good or bad, becomes ``{"success": ..., "message": ...,
"data": ...}`` plus a status code. Payload keys are camelCased on the way
out.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from typing import Any

from catalog.application.dto import CategoryPageDTO
from catalog.domain.exceptions import EntityNotFoundError, ValidationError

INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class Envelope:
    status_code: int
    body: dict[str, Any]


def _camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.title() for part in rest)


def to_payload(value: Any) -> Any:
    """Turn DTOs into JSON-ready data with camelCase keys."""
    if is_dataclass(value) and not isinstance(value, type):
        value = asdict(value)
    if isinstance(value, dict):
        return {_camel(k): to_payload(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_payload(v) for v in value]
    return value


def ok(data: Any, message: str | None = None) -> Envelope:
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    body["data"] = to_payload(data)
    return Envelope(200, body)


def page_ok(page: CategoryPageDTO) -> Envelope:
    """The short-circuit page only carries ``selectedCategory``."""
    if page.is_empty:
        return ok({"selected_category": page.selected_category}, message=page.message)
    return ok(
        {
            "selected_category": page.selected_category,
            "different_category": page.different_category,
            "most_selling_courses": page.most_selling_courses,
        }
    )


def failure(exc: Exception, internal_message: str | None = None) -> Envelope:
    """Map an exception to a failure envelope.

    ``internal_message`` replaces the message of unexpected errors, the
    exception text then goes under ``error``.
    """
    if isinstance(exc, ValidationError):
        return Envelope(400, {"success": False, "message": str(exc)})
    if isinstance(exc, EntityNotFoundError):
        return Envelope(404, {"success": False, "message": str(exc)})
    if internal_message is not None:
        return Envelope(
            500, {"success": False, "message": internal_message, "error": str(exc)}
        )
    return Envelope(500, {"success": False, "message": str(exc)})
