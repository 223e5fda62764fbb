import pytest

from coursecatalog.table import Course, CourseTable


def make(number, title="Title", prereqs=None):
    return Course(number, title, list(prereqs or []))


def test_default_size_is_179():
    assert CourseTable().size == 179


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        CourseTable(0)


def test_course_defaults_are_empty():
    course = Course()
    assert course.course_number == ""
    assert course.title == ""
    assert course.prerequisites == []


@pytest.mark.parametrize("key", ["CSCI300", "MATH201", "", "csci100", "é"])
def test_bucket_index_in_range_and_stable(key):
    table = CourseTable(17)
    index = table.bucket_index(key)
    assert 0 <= index < 17
    assert table.bucket_index(key) == index


def test_bucket_index_of_empty_key_is_zero():
    assert CourseTable().bucket_index("") == 0


def test_insert_and_search():
    table = CourseTable()
    course = make("CSCI300", "Introduction to Algorithms", ["CSCI200", "MATH201"])
    table.insert(course)
    found = table.search("CSCI300")
    assert found is course
    assert found.prerequisites == ["CSCI200", "MATH201"]


def test_search_missing_returns_none():
    table = CourseTable()
    table.insert(make("CSCI100"))
    assert table.search("CSCI999") is None


def test_search_is_case_sensitive():
    table = CourseTable()
    table.insert(make("CSCI100"))
    assert table.search("csci100") is None


def test_single_bucket_chains_newest_first():
    table = CourseTable(1)
    for number in ["A", "B", "C"]:
        table.insert(make(number))
    assert [c.course_number for c in table.all_courses()] == ["C", "B", "A"]


def test_duplicate_insert_shadows_older():
    table = CourseTable()
    table.insert(make("CSCI100", "Old"))
    table.insert(make("CSCI100", "New"))
    assert table.search("CSCI100").title == "New"
    assert len(table) == 2
    assert table.remove("CSCI100") is True
    assert table.search("CSCI100").title == "Old"


def test_remove_head_middle_and_tail():
    table = CourseTable(1)
    for number in ["A", "B", "C", "D"]:
        table.insert(make(number))
    assert table.remove("C") is True
    assert table.remove("D") is True
    assert table.remove("A") is True
    assert [c.course_number for c in table] == ["B"]


def test_remove_missing_returns_false():
    table = CourseTable()
    table.insert(make("CSCI100"))
    assert table.remove("CSCI200") is False
    assert len(table) == 1


def test_len_iter_and_all_courses_agree():
    table = CourseTable(7)
    numbers = ["CSCI100", "CSCI101", "CSCI200", "CSCI300", "MATH201", "CSCI350"]
    for number in numbers:
        table.insert(make(number))
    assert len(table) == len(numbers)
    assert sorted(c.course_number for c in table) == sorted(numbers)
    assert table.all_courses() == list(table)


def test_all_courses_follow_bucket_order():
    table = CourseTable(5)
    for number in ["CSCI100", "CSCI101", "CSCI200", "MATH201"]:
        table.insert(make(number))
    indices = [table.bucket_index(c.course_number) for c in table.all_courses()]
    assert indices == sorted(indices)


def test_contains():
    table = CourseTable()
    table.insert(make("MATH201"))
    assert "MATH201" in table
    assert "MATH202" not in table
    assert 42 not in table


def test_empty_table():
    table = CourseTable()
    assert len(table) == 0
    assert table.all_courses() == []