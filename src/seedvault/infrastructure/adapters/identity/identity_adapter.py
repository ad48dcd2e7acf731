"""IdentityAdapter - translates seedvault_identity types to the vault's ports.

This is the only place in the vault's infrastructure that turns identity
types into CurrentUser (the presentation layer wires everything together).
"""

from seedvault.application.ports.identity import CurrentUser
from seedvault_identity import UserContext


class IdentityAdapter:
    """Adapts seedvault_identity types to the vault's port interfaces."""

    @staticmethod
    def to_current_user(user_context: UserContext) -> CurrentUser:
        return CurrentUser(user_id=user_context.user_id, email=user_context.email)
