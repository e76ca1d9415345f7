"""Packaged Alembic migration scripts for INSTANCEKIT."""
