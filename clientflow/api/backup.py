# clientflow/api/backup.py

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from clientflow.db.engine import get_engine
from clientflow.db.snapshot import dump_snapshot, load_snapshot
from clientflow.models.backup import BackupSnapshot, RestorePayload
from clientflow.models.common import SuccessOut

router = APIRouter(prefix="/api", tags=["backup"])


@router.get("/backup", response_model=BackupSnapshot)
def backup(engine: Engine = Depends(get_engine)) -> BackupSnapshot:
    with engine.connect() as conn:
        return dump_snapshot(conn)


@router.post("/restore", response_model=SuccessOut)
def restore(body: RestorePayload, engine: Engine = Depends(get_engine)) -> SuccessOut:
    """
    Replace clients, services, payments and tasks with the uploaded snapshot.
    Existing rows not in the snapshot are lost; the ledger is left alone.
    """
    with engine.begin() as conn:
        load_snapshot(conn, body)

    return SuccessOut()
