"""Unit tests for comment payload validation."""

import pytest

from colloquy.domain.service import (
    CommentPayload,
    validate_comment_payload,
    validate_content,
)
from colloquy.domain.service.validation import is_absolute_url
from tests.conftest import ANONYMOUS, make_user


def fields(errors):
    return [e.field for e in errors]


class TestValidateContent:
    """Tests for validate_content."""

    def test_accepts_single_character(self):
        assert validate_content("x") == []

    def test_accepts_exactly_max_length(self):
        assert validate_content("a" * 1000) == []

    def test_rejects_over_max_length(self):
        errors = validate_content("a" * 1001)

        assert fields(errors) == ["content"]
        assert "1000" in errors[0].reason

    @pytest.mark.parametrize("content", [None, "", "   ", "\n\t"])
    def test_rejects_missing_or_blank(self, content):
        assert fields(validate_content(content)) == ["content"]

    def test_rejects_nul_character(self):
        errors = validate_content("hello\x00world")

        assert fields(errors) == ["content"]
        assert "NUL" in errors[0].reason


class TestValidateAnonymousPayload:
    """Anonymous callers must identify themselves."""

    def test_valid_payload_without_website(self):
        payload = CommentPayload(
            content="Hello", name="Guest", email="guest@example.com"
        )

        assert validate_comment_payload(payload, ANONYMOUS) == []

    def test_valid_payload_with_website(self):
        payload = CommentPayload(
            content="Hello",
            name="Guest",
            email="guest@example.com",
            website="https://guest.example.com/about",
        )

        assert validate_comment_payload(payload, ANONYMOUS) == []

    def test_missing_email_fails(self):
        payload = CommentPayload(content="Hello", name="Guest")

        assert fields(validate_comment_payload(payload, ANONYMOUS)) == ["email"]

    def test_missing_name_fails(self):
        payload = CommentPayload(content="Hello", email="guest@example.com")

        assert fields(validate_comment_payload(payload, ANONYMOUS)) == ["name"]

    @pytest.mark.parametrize(
        "email", ["not-an-email", "a@b", "two@@example.com", "spaced out@example.com"]
    )
    def test_malformed_email_fails(self, email):
        payload = CommentPayload(content="Hello", name="Guest", email=email)

        errors = validate_comment_payload(payload, ANONYMOUS)

        assert fields(errors) == ["email"]
        assert "valid email" in errors[0].reason

    def test_name_longer_than_column_fails(self):
        payload = CommentPayload(
            content="Hello", name="n" * 256, email="guest@example.com"
        )

        errors = validate_comment_payload(payload, ANONYMOUS)

        assert fields(errors) == ["name"]
        assert "255" in errors[0].reason

    def test_name_at_column_width_passes(self):
        payload = CommentPayload(
            content="Hello", name="n" * 255, email="guest@example.com"
        )

        assert validate_comment_payload(payload, ANONYMOUS) == []

    def test_email_longer_than_column_fails(self):
        email = "g" * 244 + "@example.com"
        payload = CommentPayload(content="Hello", name="Guest", email=email)

        errors = validate_comment_payload(payload, ANONYMOUS)

        assert fields(errors) == ["email"]
        assert "255" in errors[0].reason

    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"name": "Gu\x00est"}, "name"),
            ({"email": "guest\x00@example.com"}, "email"),
            ({"website": "https://example.com/\x00"}, "website"),
        ],
    )
    def test_nul_character_fails(self, overrides, field):
        values = {"content": "Hello", "name": "Guest", "email": "guest@example.com"}
        payload = CommentPayload(**{**values, **overrides})

        assert fields(validate_comment_payload(payload, ANONYMOUS)) == [field]

    @pytest.mark.parametrize(
        "website", ["not a url", "example.com", "/relative/path", "http://"]
    )
    def test_invalid_website_fails(self, website):
        payload = CommentPayload(
            content="Hello", name="Guest", email="guest@example.com", website=website
        )

        assert fields(validate_comment_payload(payload, ANONYMOUS)) == ["website"]

    def test_blank_website_is_treated_as_absent(self):
        payload = CommentPayload(
            content="Hello", name="Guest", email="guest@example.com", website="  "
        )

        assert validate_comment_payload(payload, ANONYMOUS) == []

    def test_reports_every_offending_field(self):
        payload = CommentPayload(content="", website="nope")

        errors = validate_comment_payload(payload, ANONYMOUS)

        assert fields(errors) == ["content", "name", "email", "website"]


class TestValidateIdentifiedPayload:
    """Registered callers are not asked for contact details."""

    def test_ignores_missing_identity_fields(self):
        payload = CommentPayload(content="Hello")

        assert validate_comment_payload(payload, make_user()) == []

    def test_ignores_invalid_identity_fields(self):
        payload = CommentPayload(content="Hello", email="nope", website="nope")

        assert validate_comment_payload(payload, make_user()) == []

    def test_still_checks_content(self):
        payload = CommentPayload(content="a" * 1001)

        assert fields(validate_comment_payload(payload, make_user())) == ["content"]


class TestIsAbsoluteUrl:
    """Tests for is_absolute_url."""

    def test_scheme_and_host_required(self):
        assert is_absolute_url("https://example.com")
        assert is_absolute_url("http://localhost:8080/path?q=1")
        assert not is_absolute_url("example.com/path")
        assert not is_absolute_url("")
