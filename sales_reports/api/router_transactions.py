"""
Transaction listing endpoint.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from pymongo.errors import PyMongoError

from sales_reports.config import DEFAULT_PAGE, DEFAULT_PER_PAGE
from sales_reports.data.store import TransactionStore
from sales_reports.analytics.listing import list_transactions
from sales_reports.api.dependencies import get_store, month_from_query
from sales_reports.api.errors import ServerError
from sales_reports.api.response_models import TransactionPage

router = APIRouter(tags=["transactions"])


@router.get("/transactions", response_model=TransactionPage)
def transactions(
    month: int = Depends(month_from_query),
    search: str = Query("", description="Title/description substring or exact price"),
    page: int = Query(DEFAULT_PAGE, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, alias="perPage"),
    store: TransactionStore = Depends(get_store),
):
    """Paged month listing with optional search."""
    try:
        return list_transactions(store, month, search, page, per_page)
    except PyMongoError as exc:
        raise ServerError("Error fetching transactions", exc)
