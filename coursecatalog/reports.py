"""Text reports over the courses held in a course table."""

from __future__ import annotations

from .table import Course, CourseTable
from .text import to_upper, trim


class CourseNotFoundError(LookupError):
    """Raised when a requested course number is not in the table."""

    def __init__(self, course_number: str) -> None:
        super().__init__(
            f"Course '{course_number}' not found. "
            "Please enter a valid course number."
        )
        self.course_number = course_number


def sorted_courses(table: CourseTable) -> list[Course]:
    """Return every course in the table ordered by course number."""
    return sorted(table, key=lambda course: course.course_number)


def format_course_list(table: CourseTable) -> str:
    """Render the schedule of all courses in course-number order."""
    courses = sorted_courses(table)
    if not courses:
        raise ValueError("No courses loaded. Please load data first (Option 1).")
    lines = ["Courses loaded successfully!", "Here is a sample schedule:", ""]
    lines.extend(f"{course.course_number}, {course.title}" for course in courses)
    return "\n".join(lines)


def format_course_information(table: CourseTable, course_number: str) -> str:
    """Render one course's number, title and prerequisites.

    The lookup ignores surrounding whitespace and letter case.
    """
    wanted = trim(course_number)
    if not wanted:
        raise ValueError(
            "Course number cannot be empty. Please enter a valid course number."
        )
    course = table.search(to_upper(wanted))
    if course is None:
        raise CourseNotFoundError(wanted)
    prereqs = ", ".join(course.prerequisites) if course.prerequisites else "None"
    return f"{course.course_number}, {course.title}\nPrerequisites: {prereqs}"