# workforce/schemas/common.py
from pydantic import BaseModel, ConfigDict

# Largest id the integer primary keys can hold
MAX_ID = 2**31 - 1


class Pagination(BaseModel):
    total: int
    page: int
    limit: int
    totalPages: int


class FieldError(BaseModel):
    field: str
    message: str

    model_config = ConfigDict(frozen=True)
