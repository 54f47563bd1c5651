"""Caller identities.

The identity resolver turns every request into exactly one of these.
"""

from typing import Literal, Union

from colloquy.domain.value import Role, UserId
from colloquy.domain.value.common import ValueObject


class AuthenticatedCaller(ValueObject):
    """A caller with a verified user id and role."""

    kind: Literal["authenticated"] = "authenticated"
    user_id: UserId
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class AnonymousCaller(ValueObject):
    """A caller without (valid) credentials."""

    kind: Literal["anonymous"] = "anonymous"

    @property
    def is_admin(self) -> bool:
        return False


Caller = Union[AuthenticatedCaller, AnonymousCaller]
