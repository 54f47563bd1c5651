"""Comment payload validation.

Pure functions: no I/O, no logging. Each offending field yields one
FieldError; callers decide how to report them.
"""

import re
from typing import Optional

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from colloquy.domain.model.caller import AnonymousCaller, Caller
from colloquy.domain.value import (
    MAX_CONTENT_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    FieldError,
)
from colloquy.domain.value.common import ValueObject

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_url_adapter = TypeAdapter(AnyUrl)


class CommentPayload(ValueObject):
    """Raw fields submitted when creating a comment."""

    content: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_absolute_url(value: str) -> bool:
    """Check that a value parses as an absolute URL with scheme and host."""
    try:
        url = _url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return bool(url.scheme and url.host)


def _has_nul(value: Optional[str]) -> bool:
    # PostgreSQL text columns cannot store NUL
    return value is not None and "\x00" in value


def validate_content(content: Optional[str]) -> list[FieldError]:
    """Validate comment content.

    Args:
        content: Submitted content

    Returns:
        A single-item list when content is missing, blank, too long or
        contains a NUL character
    """
    if _is_blank(content):
        return [FieldError(field="content", reason="Content is required")]
    if len(content) > MAX_CONTENT_LENGTH:
        return [
            FieldError(
                field="content",
                reason=f"Content must be {MAX_CONTENT_LENGTH} characters or less",
            )
        ]
    if _has_nul(content):
        return [FieldError(field="content", reason="Content contains a NUL character")]
    return []


def _validate_name(name: Optional[str]) -> Optional[FieldError]:
    if _is_blank(name):
        return FieldError(
            field="name", reason="Name is required for anonymous comments"
        )
    if len(name.strip()) > MAX_NAME_LENGTH:
        return FieldError(
            field="name", reason=f"Name must be {MAX_NAME_LENGTH} characters or less"
        )
    if _has_nul(name):
        return FieldError(field="name", reason="Name contains a NUL character")
    return None


def _validate_email(email: Optional[str]) -> Optional[FieldError]:
    if _is_blank(email):
        return FieldError(
            field="email", reason="Email is required for anonymous comments"
        )
    if len(email.strip()) > MAX_EMAIL_LENGTH:
        return FieldError(
            field="email", reason=f"Email must be {MAX_EMAIL_LENGTH} characters or less"
        )
    if _has_nul(email) or not EMAIL_PATTERN.match(email.strip()):
        return FieldError(field="email", reason="Please provide a valid email address")
    return None


def _validate_website(website: Optional[str]) -> Optional[FieldError]:
    if _is_blank(website):
        return None
    if _has_nul(website) or not is_absolute_url(website.strip()):
        return FieldError(field="website", reason="Please provide a valid website URL")
    return None


def validate_comment_payload(
    payload: CommentPayload, caller: Caller
) -> list[FieldError]:
    """Validate a comment creation payload for the given caller.

    Anonymous callers must identify themselves with a name and a valid
    email, both short enough for the author columns; a website, when
    given, must be an absolute URL. For authenticated callers those
    fields are ignored.

    Args:
        payload: Submitted fields
        caller: Resolved caller identity

    Returns:
        Every field error found (empty when the payload is valid)
    """
    errors = validate_content(payload.content)

    if not isinstance(caller, AnonymousCaller):
        return errors

    for error in (
        _validate_name(payload.name),
        _validate_email(payload.email),
        _validate_website(payload.website),
    ):
        if error is not None:
            errors.append(error)
    return errors
