"""Unit tests for SecureString."""

import logging

import pytest

from seedvault.domain.shared.value_objects import SecureString


class TestSecureString:
    def test_get_value_returns_plaintext(self):
        assert SecureString("hunter22").get_value() == "hunter22"

    def test_str_repr_and_format_are_masked(self):
        secret = SecureString("hunter22")

        assert str(secret) == "*****"
        assert repr(secret) == "SecureString(*****)"
        assert f"{secret}" == "*****"
        assert "hunter22" not in f"{secret!r}"

    def test_logging_does_not_leak(self, caplog):
        secret = SecureString("hunter22")

        with caplog.at_level(logging.INFO):
            logging.getLogger("test").info("value=%s", secret)

        assert "hunter22" not in caplog.text

    def test_equality_compares_values(self):
        assert SecureString("a-value") == SecureString("a-value")
        assert SecureString("a-value") != SecureString("other")
        assert SecureString("a-value") != "a-value"

    def test_matches_plain_string(self):
        assert SecureString("a-value").matches("a-value")
        assert not SecureString("a-value").matches("A-value")

    def test_rejects_empty_and_non_string(self):
        with pytest.raises(ValueError):
            SecureString("")
        with pytest.raises(TypeError):
            SecureString(123)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [None, ""])
    def test_optional_maps_missing_to_none(self, value):
        assert SecureString.optional(value) is None

    def test_optional_wraps_value(self):
        wrapped = SecureString.optional("x")

        assert isinstance(wrapped, SecureString)
        assert wrapped.get_value() == "x"
