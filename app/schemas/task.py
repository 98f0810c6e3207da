
from datetime import datetime
from typing import Literal
from pydantic import BaseModel, Field

TaskStatus = Literal["pending", "completed"]

class TaskCreate(BaseModel):
    title: str = Field(min_length=3, max_length=255)
    description: str | None = Field(default=None, max_length=2000)
    status: TaskStatus | None = None

class TaskUpdate(BaseModel):
    title: str = Field(default=None, min_length=3, max_length=255)
    description: str | None = Field(default=None, max_length=2000)
    status: TaskStatus = None

class TaskOut(BaseModel):
    id: int
    user_id: int
    title: str
    description: str | None
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
