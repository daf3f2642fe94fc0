"""
Month resolution and price-bucket schemas shared by every query.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sales_reports.config import MONTH_NAMES, PRICE_BUCKETS


class InvalidMonthError(ValueError):
    """Raised when a month name does not resolve to 1-12."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid month: {name!r}")
        self.name = name


_MONTH_LOOKUP = {name: i for i, name in enumerate(MONTH_NAMES, 1)}


def month_index(name: str) -> int:
    """Resolve a full English month name (any case) to 1-12."""
    idx = _MONTH_LOOKUP.get((name or "").lower())
    if idx is None:
        raise InvalidMonthError(name)
    return idx


def month_label(index: int) -> str:
    """Display name for a month index, e.g. 3 -> "March"."""
    return MONTH_NAMES[index - 1].capitalize()


@dataclass(frozen=True)
class PriceBucket:
    """One bar-chart price range.

    ``lower``/``upper`` are the inclusive labels shown to users. Matching uses
    ``floor`` (the previous bucket's upper bound, exclusive) so fractional
    prices between labels still land in exactly one bucket.
    """
    lower: float
    upper: Optional[float]
    floor: Optional[float] = None

    @property
    def label(self) -> str:
        upper = "above" if self.upper is None else f"{self.upper:g}"
        return f"{self.lower:g}-{upper}"

    def price_filter(self) -> dict:
        """MongoDB condition on ``price`` selecting this bucket."""
        cond: dict = {"$gte": self.lower} if self.floor is None else {"$gt": self.floor}
        if self.upper is not None:
            cond["$lte"] = self.upper
        return cond

    def contains(self, price: float) -> bool:
        if self.floor is None and price < self.lower:
            return False
        if self.floor is not None and price <= self.floor:
            return False
        return self.upper is None or price <= self.upper


def _build_buckets() -> list[PriceBucket]:
    buckets = []
    previous_upper = None
    for lower, upper in PRICE_BUCKETS:
        buckets.append(PriceBucket(lower, upper, previous_upper))
        previous_upper = upper
    return buckets


BUCKETS: list[PriceBucket] = _build_buckets()
