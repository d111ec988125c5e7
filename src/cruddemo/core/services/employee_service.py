"""Employee use cases on top of the repository."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlmodel import Session

from src.cruddemo.core.exceptions import NotFoundError
from src.cruddemo.entities.service.employee import Employee, EmployeeRepository


class EmployeeService:
    """Find, save and delete employees.

    Each mutating call runs in its own transaction: it commits on success and
    rolls the session back before re-raising on failure.
    """

    def __init__(self, session: Session):
        self._session = session
        self._repository = EmployeeRepository(session)

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        try:
            yield
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

    def find_all(self) -> list[Employee]:
        return self._repository.list_all()

    def find_by_id(self, employee_id: int) -> Employee:
        employee = self._repository.get(employee_id)
        if employee is None:
            logger.debug("Employee {} not found", employee_id)
            raise NotFoundError(Employee.resource_name, employee_id)
        return employee

    def save(self, employee: Employee) -> Employee:
        """Create the employee when its id is 0, otherwise replace the stored row."""
        creating = employee.is_new
        with self._transaction():
            saved = self._repository.save(employee)
        logger.info(
            "{} employee {}", "Created" if creating else "Updated", saved.id
        )
        return saved

    def delete_by_id(self, employee_id: int) -> None:
        """Remove the employee. Deleting an unknown id is a no-op."""
        with self._transaction():
            removed = self._repository.delete(employee_id)
        if removed:
            logger.info("Deleted employee {}", employee_id)
        else:
            logger.warning("Delete requested for unknown employee {}", employee_id)
