"""
Transaction listing — month filter, text/price search, pagination.
"""
from __future__ import annotations

import math

from sales_reports.config import DEFAULT_PAGE, DEFAULT_PER_PAGE
from sales_reports.data.store import TransactionStore, search_filter
from sales_reports.analytics.common import serialize_transaction


def list_transactions(
    store: TransactionStore,
    month: int,
    search: str = "",
    page: int = DEFAULT_PAGE,
    per_page: int = DEFAULT_PER_PAGE,
) -> dict:
    """One page of month transactions matching ``search``.

    ``total`` counts every match and does not depend on paging.
    """
    query = search_filter(month, search)
    docs = store.find(query, skip=(page - 1) * per_page, limit=per_page)
    total = store.count(query)
    return {
        "transactions": [serialize_transaction(d) for d in docs],
        "total": total,
        "currentPage": page,
        "totalPages": math.ceil(total / per_page),
    }
