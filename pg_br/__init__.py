"""pg_br: PostgreSQL backup and restore helper."""

__version__ = "0.1.0"
