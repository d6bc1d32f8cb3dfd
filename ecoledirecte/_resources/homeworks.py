"""Homeworks resource — the cahier de texte."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from .._body import encode_body
from .._types import Homework
from ._utils import _data, _student_id

if TYPE_CHECKING:
    from .._http import HTTPClient


class Homeworks:
    """client.homeworks — upcoming homework, grouped by due date."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(self) -> dict[str, list[Homework]]:
        resp = self._http.get(
            f"/v3/Eleves/{_student_id(self._http)}/cahierdetexte.awp", encode_body()
        )
        days = _data(resp) or {}
        return {
            day: [Homework.from_dict(entry, due_date=day) for entry in entries]
            for day, entries in days.items()
        }

    def for_day(self, day: date | str) -> dict[str, Any]:
        """Detailed content for one day, as returned by the API."""
        if isinstance(day, date):
            day = day.isoformat()
        resp = self._http.get(
            f"/v3/Eleves/{_student_id(self._http)}/cahierdetexte/{day}.awp", encode_body()
        )
        return _data(resp) or {}
