# clientflow/db/migrations.py
"""
Startup schema initialization.

Fresh databases get every table from `metadata.create_all`. Databases created
by older releases may lack columns that were added later, so each migration
step lists the columns it introduced; a step runs while PRAGMA user_version is
below its version and only ever adds columns.
"""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError

from clientflow.db.schema import metadata

logger = logging.getLogger(__name__)

# version -> [(table, column, column DDL)]
MIGRATIONS = {
    1: [("tasks", "assigned_to", "TEXT")],
    2: [("clients", "notes", "TEXT")],
    3: [("clients", "managed_by", "TEXT")],
}

SCHEMA_VERSION = max(MIGRATIONS)


def get_schema_version(engine: Engine) -> int:
    with engine.connect() as conn:
        return conn.exec_driver_sql("PRAGMA user_version").scalar() or 0


def has_column(engine: Engine, table: str, column: str) -> bool:
    try:
        with engine.connect() as conn:
            conn.exec_driver_sql(f"SELECT {column} FROM {table} LIMIT 1")
    except OperationalError:
        return False
    return True


def init_schema(engine: Engine) -> int:
    """
    Create missing tables, then apply pending additive column patches.

    Returns the schema version the database is at afterwards. Any failure
    propagates: a half-patched schema must stop startup.
    """
    metadata.create_all(engine)

    current = get_schema_version(engine)

    for version in sorted(MIGRATIONS):
        if version <= current:
            continue

        missing = [
            (table, column, ddl)
            for table, column, ddl in MIGRATIONS[version]
            if not has_column(engine, table, column)
        ]

        with engine.begin() as conn:
            for table, column, ddl in missing:
                logger.info("Adding column %s.%s (schema v%s)", table, column, version)
                conn.exec_driver_sql(f"ALTER TABLE {table} ADD COLUMN {column} {ddl}")

            conn.exec_driver_sql(f"PRAGMA user_version = {version}")

        current = version

    return current
