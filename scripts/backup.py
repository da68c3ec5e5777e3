# scripts/backup.py
"""
Write a JSON snapshot of clients, services, payments and tasks to a file.

Usage:
    python -m scripts.backup path/to/backup.json
"""

import logging
import sys
from pathlib import Path

from clientflow.config import configure_logging, get_settings
from clientflow.db.engine import create_db_engine
from clientflow.db.snapshot import dump_snapshot

logger = logging.getLogger(__name__)


def export_file(file_path: str) -> None:
    settings = get_settings()
    engine = create_db_engine(settings.database_url)

    try:
        with engine.connect() as conn:
            snapshot = dump_snapshot(conn)
    finally:
        engine.dispose()

    Path(file_path).write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")

    logger.info("Clients:   %s", len(snapshot.clients))
    logger.info("Services:  %s", len(snapshot.services))
    logger.info("Payments:  %s", len(snapshot.payments))
    logger.info("Tasks:     %s", len(snapshot.tasks))
    logger.info("Backup written to %s", file_path)


def main():
    configure_logging(get_settings().log_level)

    if len(sys.argv) != 2:
        print("Usage: python -m scripts.backup path/to/backup.json")
        sys.exit(1)

    export_file(sys.argv[1])


if __name__ == "__main__":
    main()
