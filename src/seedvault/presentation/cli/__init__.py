"""Command-line interface for SeedVault."""
