"""Small string helpers used when reading course data."""

from __future__ import annotations

_WHITESPACE = " \t\r\n"
_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``, leaving everything else alone."""
    return text.translate(_ASCII_UPPER)


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(_WHITESPACE)


def split(text: str, delimiter: str) -> list[str]:
    """Split on ``delimiter`` and trim each field.

    A trailing empty field is not produced, so ``"a,b,"`` gives two fields
    and the empty string gives none.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return [trim(part) for part in parts]