"""Unit tests for the employee entity package."""

import pytest
from pydantic import ValidationError
from sqlmodel import Session

from src.cruddemo.entities.service.employee import Employee, EmployeeRepository


class TestEmployee:
    """Test the Employee domain entity."""

    def test_id_defaults_to_zero(self):
        """A new employee has id 0 until the store assigns one."""
        employee = Employee(first_name="Leslie", last_name="Andrews")

        assert employee.id == 0
        assert employee.is_new
        assert employee.email is None

    def test_accepts_camel_case_input(self):
        employee = Employee.model_validate(
            {"id": 3, "firstName": "Avani", "lastName": "Gupta", "email": "a@x.com"}
        )

        assert employee.first_name == "Avani"
        assert employee.last_name == "Gupta"
        assert not employee.is_new

    def test_serializes_with_camel_case_keys(self):
        employee = Employee(id=4, first_name="Yuri", last_name="Petrov")

        assert employee.model_dump(by_alias=True) == {
            "id": 4,
            "firstName": "Yuri",
            "lastName": "Petrov",
            "email": None,
        }

    def test_missing_required_field_is_rejected(self):
        with pytest.raises(ValidationError):
            Employee.model_validate({"firstName": "OnlyFirst"})

    def test_patchable_fields_exclude_identity(self):
        assert "id" not in Employee.patchable_fields
        assert Employee.patchable_fields == {"first_name", "last_name", "email"}


class TestEmployeeRepository:
    """Test the employee repository against an in-memory database."""

    def test_save_new_employee_assigns_id(self, employee_repository: EmployeeRepository):
        saved = employee_repository.save(Employee(first_name="Emma", last_name="Baumgarten"))

        assert saved.id != 0
        assert saved.first_name == "Emma"
        assert saved.last_name == "Baumgarten"

    def test_get_returns_stored_employee(
        self, employee_repository: EmployeeRepository, sample_employees: list[Employee]
    ):
        found = employee_repository.get(sample_employees[0].id)

        assert found == sample_employees[0]

    def test_get_missing_returns_none(self, employee_repository: EmployeeRepository):
        assert employee_repository.get(404) is None

    def test_list_all_in_insertion_order(
        self, employee_repository: EmployeeRepository, sample_employees: list[Employee]
    ):
        employees = employee_repository.list_all()

        assert [e.id for e in employees] == [e.id for e in sample_employees]
        assert [e.first_name for e in employees] == ["John", "Jane"]

    def test_save_existing_replaces_all_fields(
        self,
        session: Session,
        employee_repository: EmployeeRepository,
        sample_employees: list[Employee],
    ):
        target = sample_employees[0]
        replacement = Employee(id=target.id, first_name="Johnny", last_name="Doe")

        saved = employee_repository.save(replacement)
        session.commit()

        assert saved.id == target.id
        assert saved.email is None
        assert employee_repository.get(target.id).first_name == "Johnny"
        assert employee_repository.count() == 2

    def test_save_with_unknown_id_inserts_that_id(
        self, employee_repository: EmployeeRepository
    ):
        saved = employee_repository.save(Employee(id=42, first_name="Juan", last_name="Vega"))

        assert saved.id == 42
        assert employee_repository.get(42) is not None

    def test_delete(
        self, employee_repository: EmployeeRepository, sample_employees: list[Employee]
    ):
        assert employee_repository.delete(sample_employees[1].id) is True
        assert employee_repository.get(sample_employees[1].id) is None
        assert employee_repository.count() == 1

    def test_delete_missing_returns_false(self, employee_repository: EmployeeRepository):
        assert employee_repository.delete(999) is False
