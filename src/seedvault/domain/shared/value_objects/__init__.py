from seedvault.domain.shared.value_objects.secure_string import SecureString

__all__ = ["SecureString"]
