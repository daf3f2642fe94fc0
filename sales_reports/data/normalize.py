"""
Seed normalisation — raw dataset items → Transaction documents.
"""
from __future__ import annotations

import pandas as pd

from sales_reports.config import TRANSACTION_FIELDS


_TRUE_STRINGS = {"true", "1", "yes"}
_FALSE_STRINGS = {"false", "0", "no"}


# ---------------------------------------------------------------------------
# Field coercion
# ---------------------------------------------------------------------------

def coerce_sold(value) -> bool | None:
    """Map boolean-like sale flags onto True/False; unknowns become None."""
    if isinstance(value, bool):
        return value
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    return None


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Parse types and add the derived ``saleMonth`` column."""
    for col in TRANSACTION_FIELDS:
        if col not in df.columns:
            df[col] = None

    df = df[TRANSACTION_FIELDS].copy()

    # Price → float; a present but unparseable price rejects the dataset
    price = pd.to_numeric(df["price"], errors="coerce")
    bad = df["price"].notna() & price.isna()
    if bad.any():
        raise ValueError(f"non-numeric price {df.loc[bad, 'price'].iloc[0]!r} in {int(bad.sum())} item(s)")
    df["price"] = price

    # Datetime → naive UTC (the store keeps UTC, month is read in UTC)
    sale = pd.to_datetime(df["dateOfSale"], utc=True, errors="coerce", format="ISO8601")
    df["dateOfSale"] = sale.dt.tz_localize(None)
    df["saleMonth"] = sale.dt.month

    df["sold"] = df["sold"].map(coerce_sold).astype(object)

    for col in ("title", "description", "category", "image"):
        df[col] = df[col].where(df[col].notna(), None)

    return df


# ---------------------------------------------------------------------------
# DataFrame → documents
# ---------------------------------------------------------------------------

def _native(value):
    """Convert pandas scalars to plain Python for the BSON encoder."""
    if isinstance(value, pd.Timestamp):
        return None if pd.isna(value) else value.to_pydatetime()
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    if value is pd.NaT:
        return None
    return value


def to_documents(df: pd.DataFrame) -> list[dict]:
    """Render a normalised frame as insertable documents."""
    docs = []
    for row in df.to_dict("records"):
        doc = {k: _native(v) for k, v in row.items()}
        if doc["saleMonth"] is not None:
            doc["saleMonth"] = int(doc["saleMonth"])
        docs.append(doc)
    return docs


def normalize_transactions(items: list[dict]) -> list[dict]:
    """Map raw dataset items into the stored Transaction shape."""
    if not items:
        return []
    df = normalize_columns(pd.DataFrame(items))
    return to_documents(df)
