"""Endpoint fetchers, one namespace per area of the service."""

from .documents import Documents
from .forms import Forms
from .grades import Grades
from .homeworks import Homeworks
from .schoollife import SchoolLife
from .timetable import Timetable
from .workspaces import Workspaces

__all__ = [
    "Documents",
    "Forms",
    "Grades",
    "Homeworks",
    "SchoolLife",
    "Timetable",
    "Workspaces",
]
