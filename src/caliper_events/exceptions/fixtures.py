"""Fixture loading and comparison exceptions."""

from pathlib import Path
from typing import TYPE_CHECKING

from .base import CaliperError

if TYPE_CHECKING:
    from ..compare import JsonCompareResult


class FixtureError(CaliperError):
    """Base class for fixture errors."""

    pass


class FixtureNotFoundError(FixtureError):
    """Raised when a fixture path does not resolve to a readable file."""

    def __init__(self, path: Path, reason: str = "file not found"):
        super().__init__(f"Fixture not found: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason


class FixtureFormatError(FixtureError):
    """Raised when a fixture is not valid JSON."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Malformed fixture: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason


class JsonMismatchError(CaliperError, AssertionError):
    """Raised by ``assert_json_equals`` when documents differ.

    Subclasses ``AssertionError`` so pytest reports it as a test failure.
    """

    def __init__(self, result: "JsonCompareResult"):
        super().__init__(result.message)
        self.result = result
