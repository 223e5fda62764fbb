[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursecatalog"
version = "1.2.0"
description = "Course catalogue manager for academic advisors: load courses from CSV, list them, look up prerequisites, add and remove courses."
requires-python = ">=3.10"
keywords = ["courses", "catalog", "prerequisites", "advising", "csv", "hash table"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursecatalog = "coursecatalog.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coursecatalog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
