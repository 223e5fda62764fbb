"""Reading course data from comma-separated text into a course table."""

from __future__ import annotations

import os
import time
from collections.abc import Iterable
from dataclasses import dataclass

from .table import Course, CourseTable
from .text import split, to_upper, trim


class CourseDataError(Exception):
    """Raised when course data cannot be read or fails validation."""

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line = line


@dataclass(frozen=True)
class LoadSummary:
    """What a successful load produced and how long it took."""

    filename: str
    count: int
    elapsed_seconds: float
    cpu_seconds: float


def _parse_line(line: str, line_number: int) -> Course:
    tokens = split(line, ",")
    if len(tokens) < 2:
        raise CourseDataError(
            f"Line {line_number} - Invalid format "
            "(missing course number or title)",
            line_number=line_number,
            line=line,
        )
    number, title, *rest = tokens
    return Course(
        course_number=to_upper(number),
        title=title,
        prerequisites=[to_upper(token) for token in rest if token],
    )


def _check_prerequisites(courses: list[Course]) -> None:
    known = {course.course_number for course in courses}
    for course in courses:
        for prereq in course.prerequisites:
            if prereq not in known:
                raise CourseDataError(
                    f"Prerequisite '{prereq}' for course "
                    f"'{course.course_number}' does not exist in the course list."
                )


def parse_courses(lines: Iterable[str]) -> list[Course]:
    """Parse course lines, skipping blank ones, and validate prerequisites.

    Each line holds a course number, a title and any number of prerequisite
    course numbers. Course and prerequisite numbers are upper-cased. Every
    prerequisite must name a course that appears in the same data.
    """
    courses = [
        _parse_line(line.rstrip("\n"), line_number)
        for line_number, line in enumerate(lines, start=1)
        if trim(line)
    ]
    _check_prerequisites(courses)
    return courses


def load_course_data(
    filename: str | os.PathLike[str], table: CourseTable
) -> LoadSummary:
    """Load a course file into ``table``.

    Nothing is inserted unless the whole file parses and validates.
    """
    start = time.perf_counter()
    cpu_start = time.process_time()
    try:
        with open(filename, encoding="utf-8") as handle:
            courses = parse_courses(handle)
    except OSError as exc:
        raise CourseDataError(f"Could not open file '{os.fspath(filename)}'") from exc
    for course in courses:
        table.insert(course)
    return LoadSummary(
        filename=os.fspath(filename),
        count=len(courses),
        elapsed_seconds=time.perf_counter() - start,
        cpu_seconds=time.process_time() - cpu_start,
    )