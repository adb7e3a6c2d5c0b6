"""Page/limit pagination over in-memory lists."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from imara.schemas import Pagination

T = TypeVar("T")

MAX_LIMIT = 100


def paginate(items: Sequence[T], page: int = 1, limit: int = 20) -> tuple[list[T], Pagination]:
    """Slice an already-sorted sequence.

    Args:
        items: Full result set, in display order.
        page: 1-based page number.
        limit: Items per page (capped at 100).

    Returns:
        Tuple of (page items, pagination metadata).
    """
    page = max(page, 1)
    limit = max(1, min(limit, MAX_LIMIT))
    start = (page - 1) * limit
    total = len(items)
    return list(items[start : start + limit]), Pagination(
        page=page,
        limit=limit,
        total=total,
        pages=math.ceil(total / limit),
    )
