# clientflow/models/tasks.py

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, field_validator


class TaskCreate(BaseModel):
    client_id: Optional[int] = None
    title: Optional[str] = None
    assigned_to: Optional[str] = None
    due_date: Optional[date] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class TaskStatusUpdate(BaseModel):
    status: Optional[str] = None


class TaskOut(BaseModel):
    id: int
    client_id: Optional[int] = None
    title: str
    assigned_to: Optional[str] = None
    due_date: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    client_name: str

    class Config:
        from_attributes = True
