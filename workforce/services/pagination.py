# workforce/services/pagination.py
import math
from dataclasses import dataclass
from typing import Generic, List, TypeVar

T = TypeVar("T")

DEFAULT_LIMIT = 10


@dataclass
class Page(Generic[T]):
    data: List[T]
    total: int
    page: int
    total_pages: int


def page_number(limit: int, offset: int) -> int:
    return offset // limit + 1


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)
