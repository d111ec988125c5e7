"""Read-only student roster router."""

from fastapi import APIRouter, Depends

from src.cruddemo.api.http.deps import get_student_roster
from src.cruddemo.entities.service.student import Student, StudentRoster

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=list[Student])
def list_students(roster: StudentRoster = Depends(get_student_roster)) -> list[Student]:
    return roster.list_all()


@router.get("/{student_index}", response_model=Student)
def get_student(
    student_index: int, roster: StudentRoster = Depends(get_student_roster)
) -> Student:
    """Get a student by zero-based roster position."""
    return roster.get(student_index)
