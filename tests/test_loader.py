import pytest

from coursecatalog.loader import CourseDataError, load_course_data, parse_courses
from coursecatalog.table import CourseTable

SAMPLE = [
    "CSCI100,Introduction to Computer Science\n",
    "CSCI101,Introduction to Programming in C++,CSCI100\n",
    "\n",
    "math201,Discrete Mathematics\n",
    "CSCI300,Introduction to Algorithms,CSCI101,math201\n",
]


def test_parse_courses_reads_numbers_titles_and_prerequisites():
    courses = parse_courses(SAMPLE)
    assert [c.course_number for c in courses] == [
        "CSCI100",
        "CSCI101",
        "MATH201",
        "CSCI300",
    ]
    assert courses[1].title == "Introduction to Programming in C++"
    assert courses[3].prerequisites == ["CSCI101", "MATH201"]
    assert courses[0].prerequisites == []


def test_parse_courses_trims_fields_and_skips_empty_prerequisites():
    courses = parse_courses(["  a1 ,  Title one  ,\r\n", "b2, Two, , a1 ,\n"])
    assert courses[0].course_number == "A1"
    assert courses[0].title == "Title one"
    assert courses[1].prerequisites == ["A1"]


def test_parse_courses_skips_whitespace_only_lines():
    courses = parse_courses(["   \n", "\t\r\n", "X1,Only\n"])
    assert len(courses) == 1


def test_parse_courses_reports_line_number_of_bad_line():
    with pytest.raises(CourseDataError) as info:
        parse_courses(["A1,Title\n", "\n", "B2\n"])
    assert info.value.line_number == 3
    assert info.value.line == "B2"
    assert "Invalid format" in str(info.value)


def test_parse_courses_rejects_unknown_prerequisite():
    with pytest.raises(CourseDataError, match="Prerequisite 'Z9'"):
        parse_courses(["A1,Title,z9\n"])


def test_prerequisite_may_appear_later_in_file():
    courses = parse_courses(["A1,First,B2\n", "B2,Second\n"])
    assert courses[0].prerequisites == ["B2"]


def test_load_course_data_fills_table(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_text("".join(SAMPLE), encoding="utf-8")
    table = CourseTable()
    summary = load_course_data(path, table)
    assert summary.count == len(table)
    assert summary.filename == str(path)
    assert summary.elapsed_seconds >= 0
    found = table.search("CSCI300")
    assert found.prerequisites == ["CSCI101", "MATH201"]


def test_load_course_data_inserts_nothing_on_failure(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("A1,Title\nB2,Other,NOPE\n", encoding="utf-8")
    table = CourseTable()
    with pytest.raises(CourseDataError):
        load_course_data(path, table)
    assert len(table) == 0


def test_load_course_data_missing_file(tmp_path):
    table = CourseTable()
    with pytest.raises(CourseDataError, match="Could not open file"):
        load_course_data(tmp_path / "absent.csv", table)
    assert len(table) == 0