# clientflow/models/reports.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class HealthOut(BaseModel):
    status: str
    database: str
    clients: int
    env: str


class TrendMetric(BaseModel):
    value: float
    trend: str


class AmountMetric(BaseModel):
    value: float


class CountMetric(BaseModel):
    value: int


class StatsOut(BaseModel):
    revenue: TrendMetric
    received: TrendMetric
    pending: AmountMetric
    clients: CountMetric


class TransactionOut(BaseModel):
    id: int
    client_id: Optional[int] = None
    amount: float
    type: Optional[str] = None
    created_at: Optional[datetime] = None
    client_name: str
    company: Optional[str] = None
