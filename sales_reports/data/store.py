"""
TransactionStore — MongoDB-backed query engine for the transactions collection.

Created once at startup and handed to every request through a dependency.
Filter construction lives in plain functions so the query shapes can be
checked without a database.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection

from sales_reports.config import MONGO_URI, MONGO_DB, MONGO_COLLECTION
from sales_reports.data.schemas import PriceBucket

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Filter builders
# ---------------------------------------------------------------------------

def month_filter(month: int) -> dict:
    """Records whose sale month equals ``month`` (1-12)."""
    return {"saleMonth": month}


def parse_price(search: str) -> Optional[float]:
    """Return the search text as a finite number, or None."""
    text = search.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def search_filter(month: int, search: str = "") -> dict:
    """Month filter widened by a case-insensitive title/description/price search."""
    query = month_filter(month)
    if not search.strip():
        return query

    pattern = {"$regex": re.escape(search), "$options": "i"}
    clauses: list[dict] = [{"title": pattern}, {"description": pattern}]
    price = parse_price(search)
    if price is not None:
        clauses.append({"price": price})
    query["$or"] = clauses
    return query


def bucket_filter(month: int, bucket: PriceBucket) -> dict:
    query = month_filter(month)
    query["price"] = bucket.price_filter()
    return query


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class TransactionStore:
    """Thin query layer over one MongoDB collection."""

    def __init__(self, collection: Collection) -> None:
        self.collection = collection

    @classmethod
    def connect(
        cls,
        uri: str = MONGO_URI,
        db_name: str = MONGO_DB,
        collection: str = MONGO_COLLECTION,
    ) -> "TransactionStore":
        """Open a client (lazily connecting) and bind to the collection."""
        client = MongoClient(uri)
        logger.info("MongoDB client created for %s/%s.%s", uri, db_name, collection)
        return cls(client[db_name][collection])

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def replace_all(self, records: list[dict]) -> int:
        """Delete every document, then insert ``records``. Not transactional."""
        deleted = self.collection.delete_many({}).deleted_count
        logger.info("Deleted %d existing transactions", deleted)
        inserted = 0
        if records:
            inserted = len(self.collection.insert_many(records).inserted_ids)
        self.collection.create_index([("saleMonth", ASCENDING)])
        return inserted

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def find(self, query: dict, skip: int = 0, limit: int = 0) -> list[dict]:
        """Matching documents in insertion order, paged by skip/limit."""
        cursor = self.collection.find(query).sort("_id", ASCENDING).skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def count(self, query: Optional[dict] = None) -> int:
        return self.collection.count_documents(query or {})

    def total_sales(self, month: int) -> float:
        """Sum of ``price`` over the month, 0 when nothing matches."""
        rows = list(self.collection.aggregate([
            {"$match": month_filter(month)},
            {"$group": {"_id": None, "totalAmount": {"$sum": "$price"}}},
        ]))
        if not rows:
            return 0
        return rows[0]["totalAmount"] or 0

    def count_sold(self, month: int, sold: bool) -> int:
        query = month_filter(month)
        query["sold"] = sold
        return self.count(query)

    def count_in_bucket(self, month: int, bucket: PriceBucket) -> int:
        return self.count(bucket_filter(month, bucket))

    def category_counts(self, month: int) -> list[dict]:
        """``[{category, count}]`` for the month, ordered by category."""
        rows = self.collection.aggregate([
            {"$match": month_filter(month)},
            {"$group": {"_id": "$category", "count": {"$sum": 1}}},
        ])
        result = [{"category": r["_id"], "count": r["count"]} for r in rows]
        # None sorts first
        result.sort(key=lambda r: (r["category"] is not None, str(r["category"] or "")))
        return result
