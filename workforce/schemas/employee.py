# workforce/schemas/employee.py
from pydantic import BaseModel, Field, model_validator
from typing import Optional
from datetime import datetime

from .common import MAX_ID


class EmployeeCreate(BaseModel):
    user_id: int = Field(gt=0, le=MAX_ID)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    department: Optional[str] = Field(default=None, max_length=100)
    position: Optional[str] = Field(default=None, max_length=100)


class EmployeeUpdate(BaseModel):
    user_id: Optional[int] = Field(default=None, gt=0, le=MAX_ID)
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    department: Optional[str] = Field(default=None, max_length=100)
    position: Optional[str] = Field(default=None, max_length=100)

    model_config = {
        "extra": "forbid"
    }

    @model_validator(mode="after")
    def at_least_one_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        for name in ("user_id", "first_name", "last_name"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class EmployeeOut(BaseModel):
    id: int
    user_id: int
    first_name: str
    last_name: str
    department: Optional[str] = None
    position: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }
