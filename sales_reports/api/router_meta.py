"""
Meta endpoints: health, dataset initialisation.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from bson.errors import BSONError
from pymongo.errors import PyMongoError

from sales_reports.data.store import TransactionStore
from sales_reports.data.loader import LoadError, seed
from sales_reports.api.dependencies import get_store
from sales_reports.api.errors import ServerError
from sales_reports.api.response_models import HealthResponse, InitializeResponse

router = APIRouter(tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: TransactionStore = Depends(get_store)):
    try:
        count = store.count()
    except PyMongoError as exc:
        raise ServerError("Error reaching database", exc)
    return HealthResponse(status="ok", transactions=count)


@router.get("/initialize", response_model=InitializeResponse)
def initialize(store: TransactionStore = Depends(get_store)):
    """Replace the whole collection with the seed dataset."""
    try:
        count = seed(store)
    except (LoadError, PyMongoError, BSONError, OverflowError) as exc:
        raise ServerError("Error initializing database", exc)
    return InitializeResponse(message="Database initialized successfully.", count=count)
