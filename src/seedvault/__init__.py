"""SeedVault - owner-scoped vault for wallet recovery phrases."""

__version__ = "1.0.0"
