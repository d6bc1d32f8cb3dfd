"""
Main CLI entry point for the ecoledirecte client.

Reads a token obtained elsewhere (the login flow is not part of this tool)
and prints the requested data as tables.
"""

from __future__ import annotations

import argparse
from datetime import date
import logging
import os
import sys

from rich.console import Console

from .. import __version__
from .._client import EcoleDirecte
from .._constants import ENV_STUDENT_ID, ENV_TOKEN
from .._exceptions import EcoleDirecteError
from . import display

COMMANDS = ("forms", "workspaces", "homework", "grades", "timetable", "schoollife")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecoledirecte",
        description="Read data from EcoleDirecte",
    )
    parser.add_argument("--token", help=f"Session token (or set {ENV_TOKEN})")
    parser.add_argument("--student-id", help=f"Student id (or set {ENV_STUDENT_ID})")
    parser.add_argument("--base-url", help="Custom API base URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("command", choices=COMMANDS)
    parser.add_argument("--year", default="2023-2024", help="School year for forms")
    parser.add_argument(
        "--start", default=None, help="First day for timetable (YYYY-MM-DD, default today)"
    )
    parser.add_argument("--end", default=None, help="Last day for timetable (default --start)")
    return parser


def create_client(args: argparse.Namespace) -> EcoleDirecte:
    token = args.token or os.environ.get(ENV_TOKEN)
    student_id = args.student_id or os.environ.get(ENV_STUDENT_ID)
    if not token or not student_id:
        raise SystemExit(f"A token and a student id are required ({ENV_TOKEN}, {ENV_STUDENT_ID}).")
    client = EcoleDirecte(base_url=args.base_url)
    client.session.login(token, student={"id": student_id})
    return client


def run(args: argparse.Namespace, client: EcoleDirecte, console: Console) -> None:
    if args.command == "forms":
        display.render_forms(console, client.forms.list(args.year))
    elif args.command == "workspaces":
        display.render_workspaces(console, client.workspaces.list())
    elif args.command == "homework":
        display.render_homeworks(console, client.homeworks.list())
    elif args.command == "grades":
        display.render_grades(console, client.grades.list())
    elif args.command == "timetable":
        start = args.start or date.today().isoformat()
        display.render_timetable(console, client.timetable.list(start, args.end))
    elif args.command == "schoollife":
        display.render_schoollife(console, client.schoollife.get())


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")
    console = console or Console()

    with create_client(args) as client:
        try:
            run(args, client, console)
        except EcoleDirecteError as e:
            console.print(f"[red]❌ {type(e).__name__}: {e.message}[/red]")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
