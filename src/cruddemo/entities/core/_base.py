from typing import ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from pydantic.alias_generators import to_camel
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class with a store-assigned integer identifier.

    Entities serialize with camelCase keys and accept either camelCase or
    snake_case on input. An ``id`` of 0 marks a record the store has not
    seen yet.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    resource_name: ClassVar[str] = "Entity"
    identity_field: ClassVar[str] = "id"
    patchable_fields: ClassVar[frozenset[str]] = frozenset()

    id: int = PydanticField(
        default=0,
        description="Unique identifier for the entity; 0 means not yet persisted",
    )

    @property
    def is_new(self) -> bool:
        return self.id == 0


class EntityTable(SQLModel, table=False):
    """Base table model with an autoincrement integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the entity",
    )
