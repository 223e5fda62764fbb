"""Course catalogue for academic advisors: load courses from CSV, list, look up, add and remove them."""

__version__ = "1.2.0"