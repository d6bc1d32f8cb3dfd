"""Tests for the EcoleDirecte client facade and its configuration."""

import responses

from ecoledirecte import EcoleDirecte, Session
from ecoledirecte._constants import API_URL, API_VERSION
from ecoledirecte._resources import Forms, Workspaces


class TestClientInit:
    def test_defaults(self):
        client = EcoleDirecte()
        assert client.http.base_url == API_URL
        assert client.http.version == API_VERSION
        assert isinstance(client.session, Session)

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("ECOLEDIRECTE_API_URL", "https://staging.example.com/")
        monkeypatch.setenv("ECOLEDIRECTE_API_VERSION", "1.0.0")
        client = EcoleDirecte()
        assert client.http.base_url == "https://staging.example.com"
        assert client.http.version == "1.0.0"

    def test_arguments_beat_env(self, monkeypatch):
        monkeypatch.setenv("ECOLEDIRECTE_API_URL", "https://staging.example.com")
        client = EcoleDirecte(base_url="https://local.test", version="2.0")
        assert client.http.base_url == "https://local.test"
        assert client.http.version == "2.0"

    def test_namespaces(self):
        client = EcoleDirecte()
        assert isinstance(client.forms, Forms)
        assert isinstance(client.workspaces, Workspaces)
        for name in ("homeworks", "grades", "timetable", "schoollife", "documents"):
            assert hasattr(client, name)

    def test_session_shared_by_reference(self):
        session = Session()
        client = EcoleDirecte(session=session)
        assert client.session is session
        assert client.http.session is session

    def test_context_manager(self):
        with EcoleDirecte() as client:
            assert isinstance(client, EcoleDirecte)


class TestEndToEnd:
    @responses.activate
    def test_login_then_fetch(self):
        responses.add(
            responses.POST,
            "https://api.test/v3/E/7/espacestravail.awp",
            json={"code": 200, "data": [{"id": 1, "titre": "CDI"}]},
        )
        client = EcoleDirecte(base_url="https://api.test", version="4.0.0")
        client.session.login("tok", student={"id": 7})
        spaces = client.workspaces.list()
        assert spaces[0].title == "CDI"
        assert responses.calls[0].request.headers["X-Token"] == "tok"
