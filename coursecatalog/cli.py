"""Interactive menu for browsing and editing a course catalog."""

from __future__ import annotations

import argparse
import os
import re
import sys
import time
from collections.abc import Callable
from pathlib import Path

from .editing import (
    CourseEditError,
    add_course,
    find_dependents,
    parse_prerequisites,
    remove_course,
    remove_prerequisite_from_all_courses,
)
from .loader import CourseDataError, load_course_data
from .reports import CourseNotFoundError, format_course_information, format_course_list
from .table import CourseTable
from .text import to_upper, trim

_CLOCKS_PER_SEC = 1_000_000
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_LOAD_FIRST = "Please load data first (Option 1)."
_MENU = (
    "1. Load Data File.",
    "2. Print Course List.",
    "3. Print Course.",
    "4. Add Course.",
    "5. Remove Course.",
    "9. Exit.",
)
_EXIT = 9


def csv_files_in(directory: str | os.PathLike[str] = ".") -> list[str]:
    """Return the names of regular ``.csv`` files in ``directory``, sorted."""
    with os.scandir(directory) as entries:
        return sorted(
            entry.name
            for entry in entries
            if entry.is_file() and entry.name.endswith(".csv")
        )


class _Stopwatch:
    def __init__(self) -> None:
        self._wall = time.perf_counter()
        self._cpu = time.process_time()

    def report(self, label: str) -> None:
        elapsed = time.perf_counter() - self._wall
        ticks = round((time.process_time() - self._cpu) * _CLOCKS_PER_SEC)
        print(f"Time to {label}: {ticks} clock ticks")
        print(f"Time to {label}: {elapsed:.6f} seconds")


def _read_int(prompt: str) -> int | None:
    """Read an integer from the next non-blank line; None if it does not start with one."""
    line = input(prompt)
    while not line.strip():
        line = input()
    match = _INTEGER.match(line)
    return int(match.group(1)) if match else None


def _confirmed(prompt: str) -> bool:
    return to_upper(trim(input(prompt))) == "YES"


class _Session:
    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self.table = CourseTable()
        self.loaded = False
        self.actions: dict[int, Callable[[], None]] = {
            1: self.load,
            2: self.print_list,
            3: self.print_course,
            4: self.add,
            5: self.remove,
        }

    def run(self) -> None:
        while True:
            for entry in _MENU:
                print(entry)
            print()
            choice = _read_int("What would you like to do? ")
            if choice is None:
                print("Invalid input. Please enter a number for your menu choice.")
                continue
            if choice == _EXIT:
                print("Thank you for using the ABCU Course Management System. Goodbye!")
                return
            action = self.actions.get(choice)
            if action is None:
                print(f"{choice} is not a valid option. Please select 1, 2, 3, or 9.")
                print()
            elif choice != 1 and not self.loaded:
                print(_LOAD_FIRST)
            else:
                action()

    def load(self) -> None:
        files = csv_files_in(self.directory)
        if not files:
            print("No CSV files found in the current directory.")
            return
        print("Available CSV files in the current directory:")
        for number, name in enumerate(files, start=1):
            print(f"{number}. {name}")
        print()
        selection = _read_int("Enter the number of the file to load: ")
        if selection is None or not 1 <= selection <= len(files):
            print("Invalid selection.")
            return
        name = files[selection - 1]
        watch = _Stopwatch()
        try:
            summary = load_course_data(self.directory / name, self.table)
        except CourseDataError as exc:
            if not isinstance(exc.__cause__, OSError):
                print(f"{name} loaded successfully!")
            print(f"Error: {exc}", file=sys.stderr)
            if exc.line is not None:
                print(f"Line: {exc.line}", file=sys.stderr)
        else:
            self.loaded = True
            print(f"{name} loaded successfully!")
            print(f"{summary.count} courses loaded.")
            watch.report("load")
        print()

    def print_list(self) -> None:
        watch = _Stopwatch()
        try:
            text = format_course_list(self.table)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return
        print(text)
        watch.report("print")
        print()

    def print_course(self) -> None:
        wanted = input("What course do you want to know about? ")
        watch = _Stopwatch()
        try:
            print(format_course_information(self.table, wanted))
        except (ValueError, CourseNotFoundError) as exc:
            print(f"Error: {exc}")
        else:
            watch.report("print")
        print()

    def add(self) -> None:
        self._add()
        print()

    def _add(self) -> None:
        number = to_upper(trim(input("Enter course number (e.g., CSCI300): ")))
        if not number:
            print("Error: Course number cannot be empty.")
            return
        if number in self.table:
            print(f"Error: Course {number} already exists.")
            return
        title = input("Enter course title: ")
        if not title:
            print("Error: Course title cannot be empty.")
            return
        prereq_text = input(
            "Enter prerequisites (comma-separated, leave blank or type 'none' if none): "
        )
        try:
            course = add_course(self.table, number, title, parse_prerequisites(prereq_text))
        except CourseEditError as exc:
            print(f"Error: {exc}")
            if exc.missing_prerequisite is not None:
                print("Course not added. Please add prerequisites first.")
            return
        print(f"Course '{course.course_number}' added successfully!")

    def remove(self) -> None:
        self._remove()
        print()

    def _remove(self) -> None:
        watch = _Stopwatch()
        raw = input("Enter course number to remove: ")
        number = to_upper(trim(raw))
        if not number:
            print("Error: Course number cannot be empty.")
            return
        if number not in self.table:
            print(f"Error: Course {raw} not found.")
            return
        dependents = find_dependents(self.table, number)
        if dependents:
            print()
            print(f"WARNING: {number} is a prerequisite for:")
            for dependent in dependents:
                print(f"  - {dependent}")
            print()
            print("Removing this course will affect these courses.")
            if not _confirmed("Are you sure you want to continue? (yes/no): "):
                print("Course removal cancelled.")
                return
        try:
            remove_course(self.table, number)
        except CourseEditError:
            print("Error: Failed to remove course.")
            return
        print()
        print(f"Course {number} removed successfully.")
        print(
            "WARNING: All prerequisites referencing this course will be "
            "automatically removed from other courses."
        )
        if _confirmed("Do you want to proceed with prerequisite cleanup? (yes/no): "):
            remove_prerequisite_from_all_courses(self.table, number)
            print("Prerequisite cleanup completed.")
        else:
            print(
                "Prerequisite cleanup skipped. Some courses may still reference "
                "this course as a prerequisite."
            )
        watch.report("remove")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive course catalog menu."""
    parser = argparse.ArgumentParser(
        prog="coursecatalog",
        description="Browse and edit a course catalog loaded from CSV files.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory to look for CSV files in (default: current directory)",
    )
    args = parser.parse_args(argv)
    session = _Session(Path(args.directory))
    print("Welcome to the ABCU Course Management System!")
    print()
    try:
        session.run()
    except EOFError:
        print()
    return 0