"""
Monthly analytics endpoints — statistics, bar chart, pie chart, combined.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from pymongo.errors import PyMongoError

from sales_reports.data.store import TransactionStore
from sales_reports.analytics import monthly
from sales_reports.api.dependencies import get_store, month_from_path
from sales_reports.api.errors import ServerError
from sales_reports.api.response_models import (
    CategoryCount, CombinedResponse, PriceRangeCount, StatisticsResponse,
)

router = APIRouter(tags=["charts"])


@router.get("/statistics/{month}", response_model=StatisticsResponse)
def statistics(
    month: int = Depends(month_from_path),
    store: TransactionStore = Depends(get_store),
):
    """Total sales and sold / not-sold counts."""
    try:
        return monthly.statistics(store, month)
    except PyMongoError as exc:
        raise ServerError("Error fetching statistics", exc)


@router.get("/bar-chart/{month}", response_model=list[PriceRangeCount])
def bar_chart(
    month: int = Depends(month_from_path),
    store: TransactionStore = Depends(get_store),
):
    """Item counts per fixed price range."""
    try:
        return monthly.bar_chart(store, month)
    except PyMongoError as exc:
        raise ServerError("Error fetching bar chart data", exc)


@router.get("/pie-chart/{month}", response_model=list[CategoryCount])
def pie_chart(
    month: int = Depends(month_from_path),
    store: TransactionStore = Depends(get_store),
):
    """Item counts per category."""
    try:
        return monthly.pie_chart(store, month)
    except PyMongoError as exc:
        raise ServerError("Error fetching pie chart data", exc)


@router.get("/combined/{month}", response_model=CombinedResponse)
def combined(
    month: int = Depends(month_from_path),
    store: TransactionStore = Depends(get_store),
):
    """Statistics, bar chart and pie chart together; all or nothing."""
    try:
        return monthly.combined(store, month)
    except PyMongoError as exc:
        raise ServerError("Error fetching combined data", exc)
