"""The vault's view of whoever is calling.

Commands and repositories depend on this type rather than on
``seedvault_identity``; the identity adapter builds it from a
``UserContext``.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CurrentUser:
    user_id: UUID
    email: str
