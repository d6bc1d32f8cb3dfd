"""Tests for session state."""

from ecoledirecte._session import Session


class TestSession:
    def test_defaults(self):
        s = Session()
        assert s.token is None
        assert s.is_logged_in is False
        assert s.student == {}
        assert s.student_id is None

    def test_login(self):
        s = Session()
        s.login("tok", student={"id": 42}, school={"nom": "Lycée"}, modules=[{"code": "NOTES"}])
        assert s.token == "tok"
        assert s.is_logged_in
        assert s.student_id == 42
        assert s.school == {"nom": "Lycée"}
        assert s.modules == [{"code": "NOTES"}]

    def test_login_keeps_student_when_omitted(self):
        s = Session(student={"id": 1})
        s.login("tok")
        assert s.student_id == 1

    def test_set_token_leaves_login_flag(self):
        s = Session()
        s.set_token("tok")
        assert s.has_token
        assert not s.is_logged_in

    def test_logout(self):
        s = Session()
        s.login("tok", student={"id": 1})
        s.logout()
        assert s.token is None
        assert not s.is_logged_in
        assert s.student_id == 1

    def test_empty_token_is_not_a_token(self):
        assert not Session(token="").has_token

    def test_instances_do_not_share_state(self):
        a, b = Session(), Session()
        a.student["id"] = 1
        assert b.student == {}
