"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model with validation
- table.py: Database persistence model (stored entities only)
- repository.py / roster.py: Data access layer
"""

from .service.employee import Employee, EmployeeRepository, EmployeeTable
from .service.student import Student, StudentRoster

__all__ = [
    "Employee",
    "EmployeeTable",
    "EmployeeRepository",
    "Student",
    "StudentRoster",
]
