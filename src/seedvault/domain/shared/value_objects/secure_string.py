"""Masked wrapper for recovery phrases and passwords."""

from __future__ import annotations

import hmac
from dataclasses import dataclass

MASK = "*****"


@dataclass(frozen=True, repr=False)
class SecureString:
    """
    A non-empty string that renders as ``*****``.

    ``str``, ``repr``, f-strings and ``%s`` logging all show the mask, so a
    phrase that ends up in a log line or traceback stays hidden. Call
    ``get_value()`` to read it.
    """

    _value: str

    def __post_init__(self):
        if not isinstance(self._value, str):
            msg = "SecureString value must be a string"
            raise TypeError(msg)
        if not self._value:
            msg = "SecureString cannot be empty"
            raise ValueError(msg)

    @classmethod
    def optional(cls, value: str | None) -> SecureString | None:
        """Wrap ``value``; ``None`` and ``""`` give ``None``."""
        return cls(value) if value else None

    def get_value(self) -> str:
        return self._value

    def matches(self, other: str) -> bool:
        return hmac.compare_digest(self._value.encode(), other.encode())

    def __str__(self) -> str:
        return MASK

    def __repr__(self) -> str:
        return f"SecureString({MASK})"

    def __format__(self, format_spec: str) -> str:
        return MASK

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SecureString) and self.matches(other._value)

    def __hash__(self) -> int:
        return hash(self._value)
