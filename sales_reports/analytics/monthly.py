"""
Monthly analytics — statistics, price histogram, category distribution, combined.

Each function takes a resolved month index (1-12) and the store, and returns
plain JSON-ready structures.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from sales_reports.data.schemas import BUCKETS
from sales_reports.data.store import TransactionStore
from sales_reports.analytics.common import safe_number


def statistics(store: TransactionStore, month: int) -> dict:
    """Total sales plus sold / not-sold counts for the month."""
    return {
        "totalSales": safe_number(store.total_sales(month)),
        "totalItemsSold": store.count_sold(month, True),
        "totalItemsNotSold": store.count_sold(month, False),
    }


def bar_chart(store: TransactionStore, month: int) -> list[dict]:
    """Record counts per price bucket, in bucket order."""
    with ThreadPoolExecutor(max_workers=len(BUCKETS)) as pool:
        counts = list(pool.map(lambda b: store.count_in_bucket(month, b), BUCKETS))
    return [{"range": b.label, "count": c} for b, c in zip(BUCKETS, counts)]


def pie_chart(store: TransactionStore, month: int) -> list[dict]:
    return store.category_counts(month)


def combined(store: TransactionStore, month: int) -> dict:
    """Statistics, bar chart and pie chart in one envelope; any failure propagates."""
    return {
        "statistics": statistics(store, month),
        "barChart": bar_chart(store, month),
        "pieChart": pie_chart(store, month),
    }
