"""Core services exports."""

from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .employee_service import EmployeeService
from .patch_merger import apply_patch

__all__ = [
    "DbManageService",
    "DbSessionService",
    "EmployeeService",
    "apply_patch",
]
