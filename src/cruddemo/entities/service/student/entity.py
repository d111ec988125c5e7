"""Entity: Student."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Student(BaseModel):
    """A student on the read-only roster. Students have no stored identity."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    first_name: str = Field(description="Student's first name")
    last_name: str = Field(description="Student's last name")
