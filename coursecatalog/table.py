"""Course records and a chained hash table keyed by course number."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

DEFAULT_TABLE_SIZE = 179
_MASK32 = 0xFFFFFFFF


@dataclass
class Course:
    """A single course: its number, title and prerequisite course numbers."""

    course_number: str = ""
    title: str = ""
    prerequisites: list[str] = field(default_factory=list)


class CourseTable:
    """Hash table of courses using separate chaining.

    New entries go to the front of their bucket's chain. Iteration walks the
    buckets in index order and each chain from front to back.
    """

    def __init__(self, size: int = DEFAULT_TABLE_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be at least 1")
        self.size = size
        self._buckets: list[list[Course]] = [[] for _ in range(size)]

    def bucket_index(self, key: str) -> int:
        """Return the bucket for ``key`` using a 32-bit multiply-by-31 hash."""
        value = 0
        for byte in key.encode("utf-8"):
            signed = byte - 256 if byte > 127 else byte
            value = (value * 31 + signed) & _MASK32
        return value % self.size

    def insert(self, course: Course) -> None:
        """Add ``course`` at the front of its bucket's chain."""
        self._buckets[self.bucket_index(course.course_number)].insert(0, course)

    def search(self, course_number: str) -> Course | None:
        """Return the first course with ``course_number``, or None."""
        chain = self._buckets[self.bucket_index(course_number)]
        return next((c for c in chain if c.course_number == course_number), None)

    def remove(self, course_number: str) -> bool:
        """Remove the first course with ``course_number``; report whether one was found."""
        chain = self._buckets[self.bucket_index(course_number)]
        for position, course in enumerate(chain):
            if course.course_number == course_number:
                del chain[position]
                return True
        return False

    def all_courses(self) -> list[Course]:
        """Return every stored course in bucket order."""
        return list(self)

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def __iter__(self) -> Iterator[Course]:
        for chain in self._buckets:
            yield from chain

    def __contains__(self, course_number: object) -> bool:
        return isinstance(course_number, str) and self.search(course_number) is not None