"""Schema creation and sample data for the employee directory."""

from loguru import logger
from sqlmodel import SQLModel

from src.cruddemo.core.services.database.db_session import DbSessionService
from src.cruddemo.entities.service.employee import Employee, EmployeeRepository

SAMPLE_EMPLOYEES: tuple[Employee, ...] = (
    Employee(first_name="Leslie", last_name="Andrews", email="leslie@luv2code.com"),
    Employee(first_name="Emma", last_name="Baumgarten", email="emma@luv2code.com"),
    Employee(first_name="Avani", last_name="Gupta", email="avani@luv2code.com"),
    Employee(first_name="Yuri", last_name="Petrov", email="yuri@luv2code.com"),
    Employee(first_name="Juan", last_name="Vega", email="juan@luv2code.com"),
)


class DbManageService:
    def __init__(self, db_service: DbSessionService | None = None):
        self._db = db_service or DbSessionService()

    def create_all(self) -> None:
        """Create all database tables."""
        from src.cruddemo.entities.service.employee import EmployeeTable  # noqa: F401

        SQLModel.metadata.create_all(self._db.engine)
        logger.info("Database initialized with tables.")

    def seed(self) -> int:
        """Insert the sample employees when the table is empty.

        Returns the number of rows inserted.
        """
        with self._db.session_scope() as session:
            repository = EmployeeRepository(session)
            if repository.count():
                logger.info("Employee table already populated; skipping seed")
                return 0
            for employee in SAMPLE_EMPLOYEES:
                repository.save(employee.model_copy())
        logger.info("Seeded {} sample employees", len(SAMPLE_EMPLOYEES))
        return len(SAMPLE_EMPLOYEES)
