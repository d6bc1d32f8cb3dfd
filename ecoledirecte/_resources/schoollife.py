"""School life resource — absences, lateness, sanctions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._body import encode_body
from .._types import SchoolLife as SchoolLifeData
from ._utils import _data, _student_id

if TYPE_CHECKING:
    from .._http import HTTPClient


class SchoolLife:
    """client.schoollife — vie scolaire."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def get(self) -> SchoolLifeData:
        resp = self._http.get(
            f"/v3/eleves/{_student_id(self._http)}/viescolaire.awp", encode_body()
        )
        return SchoolLifeData.from_dict(_data(resp) or {})
