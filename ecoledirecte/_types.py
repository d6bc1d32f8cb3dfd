"""Dataclass models for payloads unwrapped from the ``data`` field of responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Form:
    """An administrative form (edforms) addressed to the student."""

    id: int | None
    title: str | None
    raw: dict = field(repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> Form:
        return cls(id=data.get("id"), title=data.get("titre"), raw=data)


@dataclass
class Workspace:
    """A collaborative workspace (espace de travail)."""

    id: int | None
    title: str | None
    description: str | None
    type: str | None
    is_member: bool
    is_admin: bool
    raw: dict = field(repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> Workspace:
        return cls(
            id=data.get("id"),
            title=data.get("titre"),
            description=data.get("description"),
            type=data.get("type"),
            is_member=bool(data.get("estMembre", False)),
            is_admin=bool(data.get("estAdmin", False)),
            raw=data,
        )


@dataclass
class Homework:
    """A homework entry due on a given day."""

    id: int | None
    subject: str | None
    due_date: str
    done: bool
    is_assessment: bool
    raw: dict = field(repr=False)

    @classmethod
    def from_dict(cls, data: dict, due_date: str = "") -> Homework:
        return cls(
            id=data.get("idDevoir"),
            subject=data.get("matiere"),
            due_date=due_date,
            done=bool(data.get("effectue", False)),
            is_assessment=bool(data.get("interrogation", False)),
            raw=data,
        )


@dataclass
class Grade:
    """A single grade."""

    id: int | None
    subject: str | None
    label: str | None
    value: str | None
    out_of: str | None
    coefficient: str | None
    period: str | None
    date: str | None
    raw: dict = field(repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> Grade:
        return cls(
            id=data.get("id"),
            subject=data.get("libelleMatiere"),
            label=data.get("devoir"),
            value=data.get("valeur"),
            out_of=data.get("noteSur"),
            coefficient=data.get("coef"),
            period=data.get("codePeriode"),
            date=data.get("date"),
            raw=data,
        )


@dataclass
class GradeReport:
    """Grades together with the periods they belong to."""

    grades: list[Grade]
    periods: list[dict[str, Any]]
    raw: dict = field(repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> GradeReport:
        return cls(
            grades=[Grade.from_dict(g) for g in data.get("notes") or []],
            periods=data.get("periodes") or [],
            raw=data,
        )


@dataclass
class Lesson:
    """A timetable slot."""

    id: int | None
    subject: str | None
    teacher: str | None
    room: str | None
    start: str | None
    end: str | None
    cancelled: bool
    raw: dict = field(repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> Lesson:
        return cls(
            id=data.get("id"),
            subject=data.get("matiere") or data.get("text"),
            teacher=data.get("prof"),
            room=data.get("salle"),
            start=data.get("start_date"),
            end=data.get("end_date"),
            cancelled=bool(data.get("isAnnule", False)),
            raw=data,
        )


@dataclass
class SchoolLife:
    """Absences, lateness, sanctions and encouragements."""

    absences: list[dict[str, Any]]
    sanctions: list[dict[str, Any]]
    raw: dict = field(repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> SchoolLife:
        return cls(
            absences=data.get("absencesRetards") or [],
            sanctions=data.get("sanctionsEncouragements") or [],
            raw=data,
        )
