"""Timetable resource."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from .._body import encode_body
from .._types import Lesson
from ._utils import _data, _student_id

if TYPE_CHECKING:
    from .._http import HTTPClient


class Timetable:
    """client.timetable — lessons between two dates (inclusive)."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(self, start: date | str, end: date | str | None = None) -> list[Lesson]:
        start = start.isoformat() if isinstance(start, date) else start
        if end is None:
            end = start
        end = end.isoformat() if isinstance(end, date) else end
        resp = self._http.get(
            f"/v3/E/{_student_id(self._http)}/emploidutemps.awp",
            encode_body({"dateDebut": start, "dateFin": end, "avecTrous": False}),
        )
        return [Lesson.from_dict(d) for d in _data(resp) or []]
