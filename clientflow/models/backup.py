# clientflow/models/backup.py
"""
Row shapes for full-table snapshots.

Every column is carried as-is so a restore reproduces the rows exactly,
NULLs included.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

SNAPSHOT_VERSION = "1.0"


class ClientRecord(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    notes: Optional[str] = None
    managed_by: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None


class ServiceRecord(BaseModel):
    id: int
    client_id: Optional[int] = None
    service_type: Optional[str] = None
    price: Optional[float] = None


class PaymentRecord(BaseModel):
    id: int
    client_id: Optional[int] = None
    total_amount: Optional[float] = None
    advance_paid: Optional[float] = None
    remaining_balance: Optional[float] = None
    last_updated: Optional[datetime] = None


class TaskRecord(BaseModel):
    id: int
    client_id: Optional[int] = None
    title: Optional[str] = None
    assigned_to: Optional[str] = None
    due_date: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None


class RestorePayload(BaseModel):
    clients: List[ClientRecord]
    services: List[ServiceRecord]
    payments: List[PaymentRecord]
    tasks: List[TaskRecord]


class BackupSnapshot(RestorePayload):
    timestamp: datetime
    version: str = SNAPSHOT_VERSION
