# workforce/schemas/tasks.py
import re
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from workforce.models.task import TaskPriority, TaskStatus

from .common import MAX_ID

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def check_date_string(value):
    # Calendar dates only; reject timestamps and epoch numbers
    if value is None or isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValueError("Due date must be in format YYYY-MM-DD")
    return value


class TaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[date] = None
    assigned_to_user_id: Optional[int] = Field(default=None, gt=0, le=MAX_ID)

    @field_validator("due_date", mode="before")
    @classmethod
    def due_date_format(cls, v):
        return check_date_string(v)


class TaskUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = None
    assigned_to_user_id: Optional[int] = Field(default=None, gt=0, le=MAX_ID)

    model_config = {
        "extra": "forbid"
    }

    @field_validator("due_date", mode="before")
    @classmethod
    def due_date_format(cls, v):
        return check_date_string(v)

    @model_validator(mode="after")
    def at_least_one_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        # Only description and due_date may be cleared with null
        for name in ("title", "status", "priority", "assigned_to_user_id"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class TaskOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[date] = None
    assigned_to_user_id: int
    created_by_user_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }
