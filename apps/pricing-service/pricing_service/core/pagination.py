from __future__ import annotations

from fastapi import Query

PageQuery = Query(0, ge=0, description="Zero-based page index")
SizeQuery = Query(20, ge=1, le=200, description="Number of items per page (max 200)")


def total_pages(total: int, size: int) -> int:
    return (total + size - 1) // size if size > 0 else 0
