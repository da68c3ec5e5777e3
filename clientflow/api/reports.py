# clientflow/api/reports.py

from datetime import datetime, timezone
from typing import List, Optional, Union

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from zoneinfo import ZoneInfo

from clientflow.config import Settings, get_app_settings
from clientflow.db.engine import get_engine
from clientflow.db.schema import clients, payments, transactions
from clientflow.errors import db_error_message
from clientflow.models.reports import (
    AmountMetric,
    CountMetric,
    HealthOut,
    StatsOut,
    TransactionOut,
    TrendMetric,
)

router = APIRouter(prefix="/api", tags=["reports"])


def format_trend(current: float, previous: Optional[float]) -> str:
    """
    Percentage change from previous to current, e.g. "+12.5%" or "-3.0%".
    With no previous baseline the trend is reported as "+100%".
    """
    if not previous:
        return "+100%"
    diff = (current - previous) / previous * 100
    return f"{diff:+.1f}%"


def start_of_month(now: datetime) -> datetime:
    """
    First instant of now's calendar month, as naive UTC to match stored timestamps.
    """
    first = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    return first.astimezone(timezone.utc).replace(tzinfo=None)


@router.get("/health", response_model=HealthOut)
def health_check(
    engine: Engine = Depends(get_engine),
    settings: Settings = Depends(get_app_settings),
) -> Union[HealthOut, JSONResponse]:
    try:
        with engine.connect() as conn:
            count = conn.execute(select(func.count()).select_from(clients)).scalar_one()
    except SQLAlchemyError as exc:
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": db_error_message(exc)},
        )

    return HealthOut(status="ok", database="connected", clients=count, env=settings.env)


@router.get("/stats", response_model=StatsOut)
def dashboard_stats(
    engine: Engine = Depends(get_engine),
    settings: Settings = Depends(get_app_settings),
) -> StatsOut:
    """
    Totals across all payment records, with trends measured against the
    clients that already existed before the current month began.
    """
    cutoff = start_of_month(datetime.now(ZoneInfo(settings.timezone)))
    client_payments = clients.outerjoin(payments)

    with engine.connect() as conn:
        current = conn.execute(
            select(
                func.coalesce(func.sum(payments.c.total_amount), 0).label("total_revenue"),
                func.coalesce(func.sum(payments.c.advance_paid), 0).label("total_received"),
                func.coalesce(func.sum(payments.c.remaining_balance), 0).label("total_pending"),
                func.count(clients.c.id).label("total_clients"),
            ).select_from(client_payments)
        ).first()

        previous = conn.execute(
            select(
                func.coalesce(func.sum(payments.c.total_amount), 0).label("total_revenue"),
                func.coalesce(func.sum(payments.c.advance_paid), 0).label("total_received"),
            )
            .select_from(client_payments)
            .where(clients.c.created_at < cutoff)
        ).first()

    return StatsOut(
        revenue=TrendMetric(
            value=current.total_revenue,
            trend=format_trend(current.total_revenue, previous.total_revenue),
        ),
        received=TrendMetric(
            value=current.total_received,
            trend=format_trend(current.total_received, previous.total_received),
        ),
        pending=AmountMetric(value=current.total_pending),
        clients=CountMetric(value=current.total_clients),
    )


@router.get("/transactions", response_model=List[TransactionOut])
def list_transactions(engine: Engine = Depends(get_engine)) -> List[TransactionOut]:
    """
    The payment ledger, newest first, with each entry's client name and company.
    """
    stmt = (
        select(
            transactions,
            clients.c.name.label("client_name"),
            clients.c.company,
        )
        .select_from(transactions.join(clients, transactions.c.client_id == clients.c.id))
        .order_by(transactions.c.created_at.desc(), transactions.c.id.desc())
    )

    with engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()

    return [TransactionOut(**row) for row in rows]
