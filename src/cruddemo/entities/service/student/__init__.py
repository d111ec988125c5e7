"""Entity package: Student."""

from .entity import Student
from .roster import DEFAULT_STUDENTS, StudentRoster

__all__ = ["DEFAULT_STUDENTS", "Student", "StudentRoster"]
