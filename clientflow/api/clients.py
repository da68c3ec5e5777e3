# clientflow/api/clients.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy import func, select
from sqlalchemy.engine import Connection, Engine

from clientflow.db.engine import get_engine
from clientflow.db.schema import clients, payments, services, tasks
from clientflow.errors import NotFoundError
from clientflow.models.clients import ClientCreate, ClientOut, ClientUpdate
from clientflow.models.common import CreatedOut, SuccessOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/clients", tags=["clients"])


def _client_listing():
    service_list = (
        select(func.group_concat(services.c.service_type))
        .where(services.c.client_id == clients.c.id)
        .scalar_subquery()
    )
    pending_tasks = (
        select(func.count())
        .select_from(tasks)
        .where(tasks.c.client_id == clients.c.id, tasks.c.status == "pending")
        .scalar_subquery()
    )

    return (
        select(
            clients,
            service_list.label("services"),
            payments.c.total_amount,
            payments.c.advance_paid,
            payments.c.remaining_balance,
            pending_tasks.label("pending_tasks"),
        )
        .select_from(clients.outerjoin(payments))
        .order_by(clients.c.created_at.desc(), clients.c.id.desc())
    )


def _row_to_client(row) -> ClientOut:
    data = dict(row)
    data["services"] = data["services"].split(",") if data["services"] else []
    return ClientOut(**data)


def _insert_services(conn: Connection, client_id: int, service_types: List[str]) -> None:
    if not service_types:
        return
    conn.execute(
        services.insert(),
        [{"client_id": client_id, "service_type": s} for s in service_types],
    )


@router.get("", response_model=List[ClientOut])
def list_clients(engine: Engine = Depends(get_engine)) -> List[ClientOut]:
    """
    Return all clients, newest first, with services, payment totals and
    the number of pending tasks.
    """
    with engine.connect() as conn:
        rows = conn.execute(_client_listing()).mappings().all()

    return [_row_to_client(row) for row in rows]


@router.get("/{client_id}", response_model=ClientOut)
def get_client(client_id: int, engine: Engine = Depends(get_engine)) -> ClientOut:
    with engine.connect() as conn:
        stmt = _client_listing().where(clients.c.id == client_id)
        row = conn.execute(stmt).mappings().first()

    if row is None:
        raise NotFoundError("Client not found")

    return _row_to_client(row)


@router.post("", response_model=CreatedOut, status_code=201)
def create_client(body: ClientCreate, engine: Engine = Depends(get_engine)) -> CreatedOut:
    """
    Create the client, its services and its payment record in one transaction.
    """
    with engine.begin() as conn:
        result = conn.execute(
            clients.insert().values(
                name=body.name,
                email=body.email,
                phone=body.phone,
                company=body.company,
                notes=body.notes,
                managed_by=body.managed_by,
            )
        )
        client_id = result.inserted_primary_key[0]

        _insert_services(conn, client_id, body.services)

        conn.execute(
            payments.insert().values(
                client_id=client_id,
                total_amount=body.total_amount,
                advance_paid=body.advance_paid,
                remaining_balance=body.total_amount - body.advance_paid,
            )
        )

    logger.info("Created client %s (%s services)", client_id, len(body.services))
    return CreatedOut(id=client_id)


@router.patch("/{client_id}", response_model=SuccessOut)
def update_client(
    client_id: int,
    body: ClientUpdate,
    engine: Engine = Depends(get_engine),
) -> SuccessOut:
    """
    Update the supplied fields. A supplied services list replaces the
    client's services wholesale.
    """
    fields = body.model_dump(exclude_unset=True, exclude={"services"})

    with engine.begin() as conn:
        if fields:
            conn.execute(clients.update().where(clients.c.id == client_id).values(**fields))

        if body.services is not None:
            conn.execute(services.delete().where(services.c.client_id == client_id))
            _insert_services(conn, client_id, body.services)

    return SuccessOut()


@router.delete("/{client_id}", status_code=204)
def delete_client(client_id: int, engine: Engine = Depends(get_engine)) -> Response:
    # services, payments and tasks go with it via ON DELETE CASCADE
    with engine.begin() as conn:
        conn.execute(clients.delete().where(clients.c.id == client_id))

    logger.info("Deleted client %s", client_id)
    return Response(status_code=204)
