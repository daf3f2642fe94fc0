"""
FastAPI dependencies — TransactionStore handle, month resolution.
"""
from __future__ import annotations

from fastapi import HTTPException, Query

from sales_reports.data.store import TransactionStore
from sales_reports.data.schemas import InvalidMonthError, month_index

# ---------------------------------------------------------------------------
# Process-wide store handle (set during startup)
# ---------------------------------------------------------------------------
_store: TransactionStore | None = None


def set_store(store: TransactionStore | None) -> None:
    global _store
    _store = store


def get_store() -> TransactionStore:
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


# ---------------------------------------------------------------------------
# Month parsing
# ---------------------------------------------------------------------------

def _resolve(month: str) -> int:
    try:
        return month_index(month)
    except InvalidMonthError:
        raise HTTPException(400, "Invalid month")


def month_from_path(month: str) -> int:
    """``/{month}`` path segment → 1-12."""
    return _resolve(month)


def month_from_query(
    month: str = Query(..., description="Full English month name, any case"),
) -> int:
    """``?month=`` query parameter → 1-12."""
    return _resolve(month)
