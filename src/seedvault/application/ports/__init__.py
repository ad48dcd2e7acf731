"""Ports: what the vault needs from other bounded contexts."""
