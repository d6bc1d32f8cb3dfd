"""Shared helpers for resource modules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .._http import HTTPClient


def _student_id(http: HTTPClient) -> Any:
    """Current student id, read from the session on every call."""
    return http.session.student_id


def _data(response: Any) -> Any:
    """Unwrap the ``data`` field of a response envelope."""
    if isinstance(response, dict):
        return response.get("data")
    return None
