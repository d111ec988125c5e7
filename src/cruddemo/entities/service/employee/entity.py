"""Entity: Employee."""

from typing import ClassVar

from pydantic import Field

from src.cruddemo.entities.core import Entity


class Employee(Entity):
    """Employee entity representing a person on staff.

    This is the domain model exposed over HTTP. Only the fields listed in
    ``patchable_fields`` may be changed by a partial update; ``id`` is owned
    by the store.
    """

    resource_name: ClassVar[str] = "Employee"
    patchable_fields: ClassVar[frozenset[str]] = frozenset(
        {"first_name", "last_name", "email"}
    )

    first_name: str = Field(description="Employee's first name")
    last_name: str = Field(description="Employee's last name")
    email: str | None = Field(default=None, description="Employee's email address")
