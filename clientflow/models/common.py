# clientflow/models/common.py

from pydantic import BaseModel


class CreatedOut(BaseModel):
    id: int


class SuccessOut(BaseModel):
    success: bool = True
