# clientflow/api/payments.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from clientflow.db.engine import get_engine
from clientflow.db.schema import payments, transactions
from clientflow.errors import NotFoundError
from clientflow.models.common import SuccessOut
from clientflow.models.payments import PaymentUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/payments", tags=["payments"])


@router.patch("/{client_id}", response_model=SuccessOut)
def update_payment(
    client_id: int,
    body: PaymentUpdate,
    engine: Engine = Depends(get_engine),
) -> SuccessOut:
    """
    Set the client's advance_paid to the given total and recompute the
    remaining balance. A positive amount_added is also written to the ledger.

    advance_paid and amount_added are taken as sent; they are not checked
    against each other.
    """
    with engine.begin() as conn:
        payment = conn.execute(
            select(payments.c.total_amount, payments.c.advance_paid)
            .where(payments.c.client_id == client_id)
        ).mappings().first()

        if payment is None:
            raise NotFoundError("Payment record not found")

        total_amount = payment["total_amount"] or 0

        conn.execute(
            payments.update()
            .where(payments.c.client_id == client_id)
            .values(
                advance_paid=body.advance_paid,
                remaining_balance=total_amount - body.advance_paid,
                last_updated=func.current_timestamp(),
            )
        )

        if body.amount_added is not None and body.amount_added > 0:
            conn.execute(
                transactions.insert().values(client_id=client_id, amount=body.amount_added)
            )
            logger.info("Recorded payment of %s for client %s", body.amount_added, client_id)

    return SuccessOut()
