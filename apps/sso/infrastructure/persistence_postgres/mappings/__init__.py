"""Table definitions."""

from apps.sso.infrastructure.persistence_postgres.mappings.users import metadata, users_table

__all__ = ["metadata", "users_table"]
