# coursecatalog

An interactive course catalogue for academic advisors. It loads a course
list from a CSV file, prints every course in course-number order, shows a
single course with its prerequisites, and lets you add or remove courses.
It needs nothing beyond the Python standard library.

## Installing

```
pip install .
```

## Running

```
coursecatalog [DIRECTORY]
```

`DIRECTORY` is where the menu looks for `.csv` files; it defaults to the
current directory. The menu offers:

```
1. Load Data File.
2. Print Course List.
3. Print Course.
4. Add Course.
5. Remove Course.
9. Exit.
```

- **1** lists the regular `.csv` files in the directory, sorted by name,
  and asks for the number of the one to load. On success it reports how
  many courses were loaded and how long it took. Loading another file adds
  its courses to those already held.
- **2** prints every course as `NUMBER, Title`, ordered by course number.
- **3** asks for a course number (case and surrounding whitespace are
  ignored) and prints its title and prerequisites.
- **4** asks for a course number, a title and a comma-separated list of
  prerequisites (blank or `none` for none). The number must be new, the
  title non-empty, and every prerequisite must already be loaded.
- **5** asks for a course number. If other courses list it as a
  prerequisite, they are shown and you are asked to confirm with `yes`.
  The course is removed and its number is dropped from every other
  course's prerequisite list.
- **9** exits. End of input also ends the session.

Options 2 to 5 need a file to have been loaded first.

## The CSV format

Each non-blank line holds a course number, a title, and then any number
of prerequisite course numbers, separated by commas:

```
CSCI100,Introduction to Computer Science
CSCI101,Introduction to Programming in C++,CSCI100
CSCI200,Data Structures,CSCI101
MATH201,Discrete Mathematics
CSCI300,Introduction to Algorithms,CSCI200,MATH201
```

Fields are split on every comma; there is no quoting. Whitespace around
each field is trimmed, empty prerequisite fields are skipped, and course
numbers are upper-cased so that they match without regard to case. Files
are read as UTF-8. A line with fewer than two fields, or a prerequisite
that is not itself a course in the same file, makes the whole load fail
and nothing is added.

## Using it as a library

```python
from coursecatalog.table import CourseTable
from coursecatalog.loader import load_course_data
from coursecatalog.reports import format_course_list, format_course_information
from coursecatalog.editing import add_course, remove_course

table = CourseTable(179)
summary = load_course_data("courses.csv", table)
print(summary.count, "courses loaded")

print(format_course_list(table))
print(format_course_information(table, "csci300"))

add_course(table, "CSCI400", "Large Software Development", ["CSCI300"])
remove_course(table, "CSCI400")
```

The modules:

- `coursecatalog.table` — `Course` (a dataclass with `course_number`,
  `title` and `prerequisites`) and `CourseTable`, a chained hash table
  with `insert`, `search`, `remove`, `all_courses`, `len()`, iteration and
  `in` by course number.
- `coursecatalog.text` — `to_upper`, `trim` and `split` helpers.
- `coursecatalog.loader` — `parse_courses(lines)` and
  `load_course_data(filename, table)`, which returns a `LoadSummary` with
  `filename`, `count`, `elapsed_seconds` and `cpu_seconds`.
- `coursecatalog.reports` — `sorted_courses`, `format_course_list` and
  `format_course_information`.
- `coursecatalog.editing` — `add_course`, `parse_prerequisites`,
  `find_dependents`, `remove_course` and
  `remove_prerequisite_from_all_courses`.
- `coursecatalog.cli` — `csv_files_in(directory)` and `main(argv=None)`.

Errors are raised as exceptions: `CourseDataError` when a file cannot be
read or is malformed, `CourseNotFoundError` when a lookup finds no course,
`CourseEditError` when an addition or removal is rejected, and
`ValueError` when a course list is requested from an empty table or a
lookup is given an empty course number.

## What it does not do

Courses are held in memory only. Additions and removals are never written
back to a CSV file, so they are lost when the program exits. The loader
does not reject a course number that appears twice; the later line wins
on lookup.