"""Fixed, in-memory student roster."""

from collections.abc import Iterable, Sequence

from src.cruddemo.core.exceptions import NotFoundError

from .entity import Student

DEFAULT_STUDENTS: tuple[Student, ...] = (
    Student(first_name="Poornima", last_name="Patel"),
    Student(first_name="Mario", last_name="Rossi"),
    Student(first_name="Mary", last_name="Smith"),
)


class StudentRoster:
    """Serves students by zero-based position, in insertion order."""

    def __init__(self, students: Iterable[Student] = DEFAULT_STUDENTS) -> None:
        self._students: tuple[Student, ...] = tuple(students)

    def list_all(self) -> Sequence[Student]:
        return list(self._students)

    def get(self, index: int) -> Student:
        if index < 0 or index >= len(self._students):
            raise NotFoundError("Student", index)
        return self._students[index]

    def __len__(self) -> int:
        return len(self._students)
