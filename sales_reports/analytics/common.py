"""
JSON helpers shared by the analytics modules.
"""
from __future__ import annotations

import datetime as dt
import math

import numpy as np
import pandas as pd
from bson import ObjectId


def safe_number(value, default: float = 0):
    """Return value unless it is None/NaN/Inf."""
    if value is None:
        return default
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return default
    return value


def sanitize_for_json(obj):
    """Recursively convert BSON/numpy/pandas types to native Python for JSON."""
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, ObjectId):
        return str(obj)
    if isinstance(obj, dt.datetime):
        # Stored dates are naive UTC
        if obj.tzinfo is None:
            obj = obj.replace(tzinfo=dt.timezone.utc)
        return obj.isoformat()
    if isinstance(obj, dt.date):
        return obj.isoformat()
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return safe_number(float(obj), None)
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, float):
        return safe_number(obj, None)
    if pd.api.types.is_scalar(obj) and pd.isna(obj):
        return None
    return obj


def serialize_transaction(doc: dict) -> dict:
    """Public view of a stored transaction (no derived columns)."""
    out = sanitize_for_json(doc)
    out.pop("saleMonth", None)
    return out
