from seedvault.application.commands.secrets.create_secret_command import (
    CreateSecretCommand,
)
from seedvault.application.commands.secrets.delete_secret_command import (
    DeleteSecretCommand,
)

__all__ = ["CreateSecretCommand", "DeleteSecretCommand"]
