# cldrtable/generator/errors.py
from __future__ import annotations

__all__ = [
    "CldrTableError",
    "MissingAnnotationsError",
    "MalformedAnnotationsError",
]


class CldrTableError(Exception):
    """Base class for table generation failures."""


class MissingAnnotationsError(CldrTableError, FileNotFoundError):
    """
    The CLDR annotations JSON file does not exist.

    :param path: Path that was looked up.
    """

    def __init__(self, path) -> None:
        super().__init__(f"Annotations file not found: {path}")
        self.path = path


class MalformedAnnotationsError(CldrTableError, ValueError):
    """
    The annotations file is not valid JSON or lacks an expected field.
    """
