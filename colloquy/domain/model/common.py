"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Entity with an identity.

    Frozen: repositories return a fresh copy (``model_copy``) for every
    change instead of mutating the stored instance.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
