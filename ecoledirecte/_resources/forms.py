"""Forms resource — administrative forms (edforms)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._body import encode_body
from .._types import Form
from ._utils import _data, _student_id

if TYPE_CHECKING:
    from .._http import HTTPClient


class Forms:
    """client.forms — list forms for a school year."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(self, year: str = "2023-2024") -> list[Form]:
        body = encode_body(
            {"anneeForms": year, "typeEntity": "E", "idEntity": _student_id(self._http)}
        )
        resp = self._http.get("/edforms.awp", body)
        return [Form.from_dict(d) for d in _data(resp) or []]
