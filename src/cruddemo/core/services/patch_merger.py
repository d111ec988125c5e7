"""Partial-update merging for entities with an immutable identity."""

from collections.abc import Mapping
from typing import Any, TypeVar

from loguru import logger
from pydantic import ValidationError

from src.cruddemo.core.exceptions import IdentityModificationError, PatchFieldError
from src.cruddemo.entities.core import Entity

E = TypeVar("E", bound=Entity)


def _field_lookup(entity_type: type[Entity]) -> dict[str, str]:
    """Map every accepted spelling (field name and alias) to the field name."""
    lookup: dict[str, str] = {}
    for name, info in entity_type.model_fields.items():
        lookup[name] = name
        if info.alias:
            lookup[info.alias] = name
    return lookup


def apply_patch(existing: E, changes: Mapping[str, Any]) -> E:
    """Return a copy of ``existing`` with the fields named in ``changes`` overwritten.

    Keys may use either the JSON (camelCase) or attribute (snake_case)
    spelling. Keys absent from ``changes`` keep their current value.

    Raises:
        IdentityModificationError: ``changes`` names the identity field. This is
            checked before anything else, so nothing is applied.
        PatchFieldError: ``changes`` names a field outside the entity's
            allow-list, or a value fails validation.
    """
    entity_type = type(existing)
    lookup = _field_lookup(entity_type)

    if any(lookup.get(key) == entity_type.identity_field for key in changes):
        raise IdentityModificationError(
            entity_type.resource_name, entity_type.identity_field
        )

    rejected = [
        key for key in changes if lookup.get(key) not in entity_type.patchable_fields
    ]
    if rejected:
        raise PatchFieldError(entity_type.resource_name, rejected)

    resolved = {lookup[key]: value for key, value in changes.items()}

    try:
        merged = entity_type.model_validate({**existing.model_dump(), **resolved})
    except ValidationError as e:
        bad_fields = {
            lookup.get(str(err["loc"][0]), str(err["loc"][0]))
            for err in e.errors()
            if err["loc"]
        }
        raise PatchFieldError(
            entity_type.resource_name, bad_fields or resolved, reason="invalid"
        ) from e

    logger.debug(
        "Patched {} {} fields {}",
        entity_type.resource_name,
        existing.id,
        sorted(resolved),
    )
    return merged
