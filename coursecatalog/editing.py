"""Adding and removing courses in a course table."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from .table import Course, CourseTable
from .text import split, to_upper, trim

_NONE_MARKER = "NONE"


class CourseEditError(Exception):
    """Raised when a course cannot be added or removed."""

    def __init__(self, message: str, missing_prerequisite: str | None = None) -> None:
        super().__init__(message)
        self.missing_prerequisite = missing_prerequisite


def _normalise(course_number: str) -> str:
    return to_upper(trim(course_number))


def parse_prerequisites(text: str) -> list[str]:
    """Turn comma-separated prerequisite input into upper-case course numbers.

    Blank input or the word "none" (in any case) means no prerequisites;
    empty fields and "none" fields are skipped.
    """
    if _normalise(text) in ("", _NONE_MARKER):
        return []
    numbers = (_normalise(part) for part in split(text, ","))
    return [number for number in numbers if number and number != _NONE_MARKER]


def add_course(
    table: CourseTable,
    course_number: str,
    title: str,
    prerequisites: Iterable[str] = (),
) -> Course:
    """Validate and insert a new course, returning it.

    The course number must be non-empty and new, the title non-empty, and
    every prerequisite must already be in the table.
    """
    number = _normalise(course_number)
    if not number:
        raise CourseEditError("Course number cannot be empty.")
    if number in table:
        raise CourseEditError(f"Course {number} already exists.")
    if not title:
        raise CourseEditError("Course title cannot be empty.")
    prereqs: list[str] = []
    for prereq in prerequisites:
        prereq_number = _normalise(prereq)
        if not prereq_number or prereq_number == _NONE_MARKER:
            continue
        if prereq_number not in table:
            raise CourseEditError(
                f"Prerequisite '{prereq_number}' does not exist in the course list.",
                missing_prerequisite=prereq_number,
            )
        prereqs.append(prereq_number)
    course = Course(course_number=number, title=title, prerequisites=prereqs)
    table.insert(course)
    return course


def find_dependents(table: CourseTable, course_number: str) -> list[str]:
    """Return the numbers of courses that list ``course_number`` as a prerequisite."""
    target = _normalise(course_number)
    return [course.course_number for course in table if target in course.prerequisites]


def remove_prerequisite_from_all_courses(table: CourseTable, course_number: str) -> int:
    """Drop ``course_number`` from every prerequisite list; return how many courses changed."""
    target = _normalise(course_number)
    changed = 0
    for course in table.all_courses():
        kept = [prereq for prereq in course.prerequisites if prereq != target]
        if len(kept) != len(course.prerequisites):
            table.remove(course.course_number)
            table.insert(replace(course, prerequisites=kept))
            changed += 1
    return changed


def remove_course(table: CourseTable, course_number: str) -> Course:
    """Remove a course and strip it from other courses' prerequisites.

    Returns the removed course.
    """
    number = _normalise(course_number)
    if not number:
        raise CourseEditError("Course number cannot be empty.")
    course = table.search(number)
    if course is None or not table.remove(number):
        raise CourseEditError(f"Course {trim(course_number)} not found.")
    remove_prerequisite_from_all_courses(table, number)
    return course