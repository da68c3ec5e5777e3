# clientflow/db/snapshot.py
"""
Full-table export and import shared by the backup API and the CLI scripts.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.engine import Connection

from clientflow.db.schema import SNAPSHOT_TABLES, clients, payments, services, tasks
from clientflow.models.backup import (
    BackupSnapshot,
    ClientRecord,
    PaymentRecord,
    RestorePayload,
    ServiceRecord,
    TaskRecord,
)

logger = logging.getLogger(__name__)


def _all_rows(conn: Connection, table, record_cls):
    rows = conn.execute(select(table).order_by(table.c.id)).mappings().all()
    return [record_cls(**row) for row in rows]


def dump_snapshot(conn: Connection) -> BackupSnapshot:
    """
    Read every row of clients, services, payments and tasks.
    The transaction ledger is not part of a snapshot.
    """
    return BackupSnapshot(
        clients=_all_rows(conn, clients, ClientRecord),
        services=_all_rows(conn, services, ServiceRecord),
        payments=_all_rows(conn, payments, PaymentRecord),
        tasks=_all_rows(conn, tasks, TaskRecord),
        timestamp=datetime.now(timezone.utc),
    )


def load_snapshot(conn: Connection, payload: RestorePayload) -> None:
    """
    Replace the contents of the snapshot tables with the payload, keeping ids.

    Must run inside a transaction (engine.begin()) so a bad row rolls back
    the deletes as well.
    """
    # Children first so foreign keys hold during the wipe
    for table in reversed(SNAPSHOT_TABLES):
        conn.execute(table.delete())

    rows_by_table = {
        clients: payload.clients,
        services: payload.services,
        payments: payload.payments,
        tasks: payload.tasks,
    }

    for table in SNAPSHOT_TABLES:
        records = rows_by_table[table]
        # an empty executemany would insert a single all-defaults row
        if records:
            conn.execute(table.insert(), [r.model_dump() for r in records])

    logger.info(
        "Restored %s clients, %s services, %s payments, %s tasks",
        len(payload.clients),
        len(payload.services),
        len(payload.payments),
        len(payload.tasks),
    )
