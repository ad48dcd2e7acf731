"""SQLAlchemy persistence for the vault domain."""
