"""Recovery phrase value object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from seedvault.domain.secrets.exceptions import InvalidSecretPhraseError
from seedvault.domain.shared.value_objects import SecureString

ALLOWED_WORD_COUNTS: tuple[int, ...] = (12, 15, 18, 21, 24)
_WORD_PATTERN = re.compile(r"^[a-z]+$")


@dataclass(frozen=True)
class SecretPhrase:
    """A normalized mnemonic recovery phrase.

    Input is trimmed and lowercased, then split on whitespace. It must have
    12, 15, 18, 21 or 24 words made only of letters a-z. The stored value
    joins the words with single spaces and is wrapped in a SecureString so
    it never shows up in logs or reprs.

    Word membership in a specific mnemonic wordlist is not checked.
    """

    value: SecureString

    @classmethod
    def parse(cls, raw: str) -> SecretPhrase:
        if not isinstance(raw, str) or not raw.strip():
            msg = "Seed phrase is required."
            raise InvalidSecretPhraseError(msg)

        words = raw.strip().lower().split()

        if len(words) not in ALLOWED_WORD_COUNTS:
            counts = ", ".join(str(c) for c in ALLOWED_WORD_COUNTS)
            msg = f"Seed phrase must contain {counts} words."
            raise InvalidSecretPhraseError(msg, {"word_count": len(words)})

        if not all(_WORD_PATTERN.match(word) for word in words):
            msg = "Seed phrase words may only contain letters a-z."
            raise InvalidSecretPhraseError(msg)

        return cls(SecureString(" ".join(words)))

    @property
    def word_count(self) -> int:
        return len(self.value.get_value().split(" "))

    def reveal(self) -> str:
        return self.value.get_value()

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"SecretPhrase({self.word_count} words)"
