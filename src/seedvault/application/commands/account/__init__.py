from seedvault.application.commands.account.delete_account_command import (
    DeleteAccountCommand,
)

__all__ = ["DeleteAccountCommand"]
