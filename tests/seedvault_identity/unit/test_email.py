"""Unit tests for the Email value object."""

import pytest

from seedvault_identity.domain.user import Email, InvalidEmailError, is_valid_email


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  Alice@Example.COM ").value == "alice@example.com"

    def test_equal_after_normalization(self):
        assert Email("Bob@example.com") == Email("bob@example.com")

    @pytest.mark.parametrize(
        "raw",
        ["", "   ", "plainaddress", "@example.com", "user@", "user@domain", "a b@c.de"],
    )
    def test_rejects_invalid(self, raw):
        with pytest.raises(InvalidEmailError):
            Email(raw)

    def test_rejects_overlong(self):
        local = "a" * 250
        with pytest.raises(InvalidEmailError):
            Email(f"{local}@example.com")

    def test_invalid_email_is_value_error(self):
        with pytest.raises(ValueError):
            Email("nope")

    def test_str(self):
        assert str(Email("x@example.com")) == "x@example.com"


class TestIsValidEmail:
    def test_plain_check_without_normalizing(self):
        assert is_valid_email("user.name+tag@sub.example.org")
        assert not is_valid_email(" user@example.com")
        assert not is_valid_email(None)  # type: ignore[arg-type]
