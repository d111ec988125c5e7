"""Domain errors raised by services and mapped to HTTP responses by the API layer."""

from collections.abc import Iterable


class CrudDemoError(Exception):
    """Base class for predictable service-layer exceptions."""


class NotFoundError(CrudDemoError):
    """Raised when no record exists for the requested id."""

    def __init__(self, resource: str, resource_id: int) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} id not found - {resource_id}")


class IdentityModificationError(CrudDemoError):
    """Raised when a partial update tries to change a record's id."""

    def __init__(self, resource: str, identity_field: str = "id") -> None:
        self.resource = resource
        self.identity_field = identity_field
        super().__init__(
            f"{resource} {identity_field} cannot be modified. "
            f"Remove '{identity_field}' from request body"
        )


class PatchFieldError(CrudDemoError):
    """Raised when a partial update names fields that cannot be patched or carries bad values."""

    def __init__(self, resource: str, fields: Iterable[str], reason: str = "not patchable") -> None:
        self.resource = resource
        self.fields = sorted(fields)
        super().__init__(f"{resource} fields {reason}: {', '.join(self.fields)}")
