"""Command layer - write operations that mutate state.

Commands represent user intentions to change system state. They are
bound to the current user through the repositories they receive.

Commands are organized by domain:
- secrets: Store and delete recovery phrases
- account: Account lifecycle (deletion with all data)
"""

from seedvault.application.commands.account import DeleteAccountCommand
from seedvault.application.commands.secrets import (
    CreateSecretCommand,
    DeleteSecretCommand,
)

__all__ = [
    "CreateSecretCommand",
    "DeleteAccountCommand",
    "DeleteSecretCommand",
]
