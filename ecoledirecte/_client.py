"""EcoleDirecte client — one session, one transport, one namespace per endpoint area."""

from __future__ import annotations

import os

from ._constants import API_URL, API_VERSION, ENV_API_URL, ENV_API_VERSION
from ._http import HTTPClient
from ._resources import Documents, Forms, Grades, Homeworks, SchoolLife, Timetable, Workspaces
from ._session import Session


class EcoleDirecte:
    """Client for the EcoleDirecte API.

    The session is shared by reference: whoever performs the login writes the
    token into ``client.session`` and every later call picks it up.

    Usage:
        client = EcoleDirecte()
        client.session.login(token, student={"id": 1234})
        for ws in client.workspaces.list():
            print(ws.id, ws.title)
    """

    def __init__(
        self,
        session: Session | None = None,
        base_url: str | None = None,
        version: str | None = None,
        timeout: float | None = None,
    ):
        base_url = base_url or os.environ.get(ENV_API_URL) or API_URL
        version = version or os.environ.get(ENV_API_VERSION) or API_VERSION

        self.session = session if session is not None else Session()
        self._http = HTTPClient(self.session, base_url=base_url, version=version, timeout=timeout)
        self.forms = Forms(self._http)
        self.workspaces = Workspaces(self._http)
        self.homeworks = Homeworks(self._http)
        self.grades = Grades(self._http)
        self.timetable = Timetable(self._http)
        self.schoollife = SchoolLife(self._http)
        self.documents = Documents(self._http)

    @property
    def http(self) -> HTTPClient:
        return self._http

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> EcoleDirecte:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
