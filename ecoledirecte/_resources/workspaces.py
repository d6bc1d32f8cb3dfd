"""Workspaces resource — list, inspect, join and leave collaborative workspaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .._body import encode_body
from .._types import Workspace
from ._utils import _data, _student_id

if TYPE_CHECKING:
    from .._http import HTTPClient


class Workspaces:
    """client.workspaces — the student's espaces de travail.

    Paths already carry their own ``verbe`` marker; the request core appends
    its marker after it with ``&``.
    """

    def __init__(self, http: HTTPClient):
        self._http = http

    def _path(self, suffix: str = "") -> str:
        return f"/v3/E/{_student_id(self._http)}/espacestravail{suffix}.awp"

    def list(self) -> list[Workspace]:
        resp = self._http.post(self._path() + "?verbe=get", encode_body())
        return [Workspace.from_dict(d) for d in _data(resp) or []]

    def get(self, workspace_id: int) -> Workspace:
        resp = self._http.post(self._path(f"/{workspace_id}") + "?verbe=get", encode_body())
        return Workspace.from_dict(_data(resp) or {})

    def join(self, workspace: Workspace) -> dict[str, Any]:
        """Join a workspace. Returns the raw envelope."""
        return self._http.post(
            self._path(f"/{workspace.id}/acces") + "?verbe=post", encode_body()
        )

    def leave(self, workspace_id: int) -> dict[str, Any]:
        """Leave a workspace. Returns the raw envelope."""
        return self._http.post(
            self._path(f"/{workspace_id}/acces") + "?verbe=delete", encode_body()
        )
