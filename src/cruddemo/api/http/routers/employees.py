"""Employee API router with CRUD and partial-update operations."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from starlette.responses import PlainTextResponse

from src.cruddemo.api.http.deps import get_employee_service
from src.cruddemo.core.services import EmployeeService, apply_patch
from src.cruddemo.entities.service.employee import Employee

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[Employee])
def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> list[Employee]:
    """List all employees."""
    return service.find_all()


@router.get("/{employee_id}", response_model=Employee)
def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Get an employee by ID."""
    return service.find_by_id(employee_id)


@router.post("", response_model=Employee)
def add_employee(
    employee: Employee,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Create a new employee. Any id in the body is ignored."""
    return service.save(employee.model_copy(update={"id": 0}))


@router.put("", response_model=Employee)
def update_employee(
    employee: Employee,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Replace the employee identified by the body's id."""
    return service.save(employee)


@router.patch("/{employee_id}", response_model=Employee)
def patch_employee(
    employee_id: int,
    patch_payload: dict[str, Any] = Body(...),
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Overwrite only the fields present in the body."""
    existing = service.find_by_id(employee_id)
    patched = apply_patch(existing, patch_payload)
    return service.save(patched)


@router.delete("/{employee_id}", response_class=PlainTextResponse)
def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> str:
    """Delete an employee."""
    service.delete_by_id(employee_id)
    return f"Deleted employee id - {employee_id}"
