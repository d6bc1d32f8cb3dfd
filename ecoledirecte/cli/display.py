"""Rich tables for CLI output."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table

from .._types import Form, GradeReport, Homework, Lesson, SchoolLife, Workspace


def _table(title: str, *columns: str) -> Table:
    table = Table(title=title, show_lines=False)
    for column in columns:
        table.add_column(column)
    return table


def _cell(value: object) -> str:
    return "" if value is None else str(value)


def render_forms(console: Console, forms: Iterable[Form]) -> None:
    table = _table("Forms", "ID", "Title")
    for form in forms:
        table.add_row(_cell(form.id), _cell(form.title))
    console.print(table)


def render_workspaces(console: Console, workspaces: Iterable[Workspace]) -> None:
    table = _table("Workspaces", "ID", "Title", "Type", "Member")
    for ws in workspaces:
        table.add_row(_cell(ws.id), _cell(ws.title), _cell(ws.type), "yes" if ws.is_member else "")
    console.print(table)


def render_homeworks(console: Console, days: dict[str, list[Homework]]) -> None:
    table = _table("Homework", "Due", "Subject", "Done")
    for day in sorted(days):
        for hw in days[day]:
            table.add_row(day, _cell(hw.subject), "✔" if hw.done else "")
    console.print(table)


def render_grades(console: Console, report: GradeReport) -> None:
    table = _table("Grades", "Date", "Subject", "Assignment", "Grade")
    for grade in report.grades:
        value = _cell(grade.value)
        if grade.out_of:
            value = f"{value}/{grade.out_of}"
        table.add_row(_cell(grade.date), _cell(grade.subject), _cell(grade.label), value)
    console.print(table)


def render_timetable(console: Console, lessons: Iterable[Lesson]) -> None:
    table = _table("Timetable", "Start", "End", "Subject", "Teacher", "Room")
    for lesson in sorted(lessons, key=lambda les: les.start or ""):
        subject = _cell(lesson.subject)
        if lesson.cancelled:
            subject = f"[strike]{subject}[/strike]"
        table.add_row(
            _cell(lesson.start),
            _cell(lesson.end),
            subject,
            _cell(lesson.teacher),
            _cell(lesson.room),
        )
    console.print(table)


def render_schoollife(console: Console, data: SchoolLife) -> None:
    table = _table("School life", "Date", "Type", "Reason")
    for entry in [*data.absences, *data.sanctions]:
        table.add_row(
            _cell(entry.get("displayDate") or entry.get("date")),
            _cell(entry.get("typeElement")),
            _cell(entry.get("motif")),
        )
    console.print(table)
