"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value compared field by field.

    Authorship variants, callers and field errors are value objects; two
    with the same fields are interchangeable.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
