# clientflow/models/clients.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class ClientCreate(BaseModel):
    # name is NOT NULL in the database; a missing one fails on insert
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    notes: Optional[str] = None
    managed_by: Optional[str] = None
    services: List[str] = []
    total_amount: float = 0
    advance_paid: float = 0


class ClientUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    notes: Optional[str] = None
    managed_by: Optional[str] = None
    status: Optional[str] = None
    services: Optional[List[str]] = None


class ClientOut(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    notes: Optional[str] = None
    managed_by: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    services: List[str] = []
    total_amount: Optional[float] = None
    advance_paid: Optional[float] = None
    remaining_balance: Optional[float] = None
    pending_tasks: int = 0

    class Config:
        from_attributes = True
