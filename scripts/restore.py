# scripts/restore.py
"""
Replace clients, services, payments and tasks with the contents of a backup file.
The transaction ledger is left as it is.

Usage:
    python -m scripts.restore path/to/backup.json
"""

import logging
import sys
from pathlib import Path

from clientflow.config import configure_logging, get_settings
from clientflow.db.engine import create_db_engine
from clientflow.db.migrations import init_schema
from clientflow.db.snapshot import load_snapshot
from clientflow.models.backup import RestorePayload

logger = logging.getLogger(__name__)


def import_file(file_path: str) -> None:
    payload = RestorePayload.model_validate_json(Path(file_path).read_text(encoding="utf-8"))

    settings = get_settings()
    engine = create_db_engine(settings.database_url)

    try:
        init_schema(engine)
        with engine.begin() as conn:
            load_snapshot(conn, payload)
    finally:
        engine.dispose()

    logger.info("Restore from %s complete", file_path)


def main():
    configure_logging(get_settings().log_level)

    if len(sys.argv) != 2:
        print("Usage: python -m scripts.restore path/to/backup.json")
        sys.exit(1)

    import_file(sys.argv[1])


if __name__ == "__main__":
    main()
