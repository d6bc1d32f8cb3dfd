"""Grades resource."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._body import encode_body
from .._types import GradeReport
from ._utils import _data, _student_id

if TYPE_CHECKING:
    from .._http import HTTPClient


class Grades:
    """client.grades — grades and periods."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(self, school_year: str = "") -> GradeReport:
        resp = self._http.get(
            f"/v3/eleves/{_student_id(self._http)}/notes.awp",
            encode_body({"anneeScolaire": school_year}),
        )
        return GradeReport.from_dict(_data(resp) or {})
