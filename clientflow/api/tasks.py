# clientflow/api/tasks.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from clientflow.db.engine import get_engine
from clientflow.db.schema import clients, tasks
from clientflow.models.common import CreatedOut, SuccessOut
from clientflow.models.tasks import TaskCreate, TaskOut, TaskStatusUpdate

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskOut])
def list_tasks(
    client_id: Optional[int] = Query(
        default=None,
        alias="clientId",
        description="Only return tasks owned by this client",
    ),
    engine: Engine = Depends(get_engine),
) -> List[TaskOut]:
    """
    Tasks with their client's name, soonest due first; undated tasks last.
    """
    stmt = (
        select(tasks, clients.c.name.label("client_name"))
        .select_from(tasks.join(clients))
        .order_by(
            func.nullif(tasks.c.due_date, "").asc().nulls_last(),
            tasks.c.created_at.desc(),
            tasks.c.id.desc(),
        )
    )

    if client_id is not None:
        stmt = stmt.where(tasks.c.client_id == client_id)

    with engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()

    return [TaskOut(**row) for row in rows]


@router.post("", response_model=CreatedOut, status_code=201)
def create_task(body: TaskCreate, engine: Engine = Depends(get_engine)) -> CreatedOut:
    with engine.begin() as conn:
        result = conn.execute(
            tasks.insert().values(
                client_id=body.client_id,
                title=body.title,
                assigned_to=body.assigned_to,
                due_date=body.due_date.isoformat() if body.due_date else None,
            )
        )

    return CreatedOut(id=result.inserted_primary_key[0])


@router.patch("/{task_id}", response_model=SuccessOut)
def update_task_status(
    task_id: int,
    body: TaskStatusUpdate,
    engine: Engine = Depends(get_engine),
) -> SuccessOut:
    # Status is free text; "pending" is the only value the app counts on
    with engine.begin() as conn:
        conn.execute(tasks.update().where(tasks.c.id == task_id).values(status=body.status))

    return SuccessOut()


@router.delete("/{task_id}", status_code=204)
def delete_task(task_id: int, engine: Engine = Depends(get_engine)) -> Response:
    with engine.begin() as conn:
        conn.execute(tasks.delete().where(tasks.c.id == task_id))

    return Response(status_code=204)
