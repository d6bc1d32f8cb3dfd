"""Shared session state read by the request core and endpoint fetchers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Session:
    """Token, login flag and identity of the logged-in account.

    One instance is shared by reference between the authentication flow
    (single writer) and the request core (many readers). Readers look the
    token up on every call and never copy it, so a refresh is picked up by
    the next request. No lock is taken: a call that already read the old
    token keeps using it.
    """

    token: str | None = None
    is_logged_in: bool = False
    student: dict[str, Any] = field(default_factory=dict)
    school: dict[str, Any] = field(default_factory=dict)
    settings: dict[str, Any] = field(default_factory=dict)
    modules: list[dict[str, Any]] = field(default_factory=list)

    @property
    def student_id(self) -> Any:
        """Identifier used by fetchers to build per-student URLs."""
        return self.student.get("id")

    @property
    def has_token(self) -> bool:
        # Empty strings count as no token.
        return bool(self.token)

    def set_token(self, token: str | None) -> None:
        """Replace the token without touching the login flag."""
        self.token = token

    def login(self, token: str, student: dict[str, Any] | None = None, **account: Any) -> None:
        """Record a successful authentication."""
        self.token = token
        self.is_logged_in = True
        if student is not None:
            self.student = student
        for key in ("school", "settings", "modules"):
            if key in account:
                setattr(self, key, account[key])

    def logout(self) -> None:
        self.token = None
        self.is_logged_in = False
