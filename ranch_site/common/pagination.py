"""
Slice-based pagination helpers
"""
import math
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel


class PageWindow(BaseModel):
    page: int
    page_size: int
    skip: int


def parse_page_number(raw: Optional[Any]) -> int:
    """Coerce a ``page`` query value; missing, non-numeric or non-positive input means page 1."""
    if raw is None:
        return 1
    try:
        page = int(str(raw).strip())
    except ValueError:
        return 1
    return page if page >= 1 else 1


def page_window(raw_page: Optional[Any], page_size: int) -> PageWindow:
    page = parse_page_number(raw_page)
    return PageWindow(page=page, page_size=page_size, skip=(page - 1) * page_size)


def total_pages(total: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return math.ceil(total / page_size)


def paginate(items: Sequence[Any], skip: int, limit: int) -> List[Any]:
    """Return up to ``limit`` items after ``skip``; a window past the end is empty, not an error."""
    return list(items[skip:skip + limit])
