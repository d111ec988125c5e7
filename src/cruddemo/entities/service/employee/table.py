"""Employee database table model."""

from src.cruddemo.entities.core import EntityTable


class EmployeeTable(EntityTable, table=True):
    """Database persistence model for employees.

    This represents how the Employee entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "employee"

    first_name: str
    last_name: str
    email: str | None = None
