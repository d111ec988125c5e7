"""Employee repository for data access operations."""

from sqlmodel import Session, select

from .entity import Employee
from .table import EmployeeTable


class EmployeeRepository:
    """Data-access layer for employees.

    The repository flushes but never commits; transaction boundaries belong
    to the caller.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Employee]:
        statement = select(EmployeeTable).order_by(EmployeeTable.id)
        rows = self._session.exec(statement).all()
        return [Employee.model_validate(row, from_attributes=True) for row in rows]

    def get(self, employee_id: int) -> Employee | None:
        row = self._session.get(EmployeeTable, employee_id)
        if row is None:
            return None
        return Employee.model_validate(row, from_attributes=True)

    def save(self, employee: Employee) -> Employee:
        """Insert a new employee (id 0) or replace the stored one with the same id."""
        if employee.is_new:
            row = EmployeeTable(**employee.model_dump(exclude={"id"}))
            self._session.add(row)
        else:
            row = self._session.merge(EmployeeTable(**employee.model_dump()))
        self._session.flush()
        self._session.refresh(row)
        return Employee.model_validate(row, from_attributes=True)

    def delete(self, employee_id: int) -> bool:
        row = self._session.get(EmployeeTable, employee_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def count(self) -> int:
        return len(self._session.exec(select(EmployeeTable.id)).all())
