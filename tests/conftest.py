"""Shared pytest fixtures: in-memory MongoDB store and API client."""

from __future__ import annotations

import mongomock
import pytest
from fastapi.testclient import TestClient

from sales_reports.api.dependencies import get_store
from sales_reports.data.normalize import normalize_transactions
from sales_reports.data.store import TransactionStore
from sales_reports.main import create_app
from tests.fakes import SAMPLE_ITEMS


@pytest.fixture
def store() -> TransactionStore:
    """Empty store over a fresh mongomock collection."""
    return TransactionStore(mongomock.MongoClient().db.transactions)


@pytest.fixture
def seeded_store(store: TransactionStore) -> TransactionStore:
    store.replace_all(normalize_transactions(SAMPLE_ITEMS))
    return store


def make_client(store: TransactionStore, **kwargs) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    return TestClient(app, **kwargs)


@pytest.fixture
def client_for():
    """Build a client bound to any store."""
    return make_client


@pytest.fixture
def client(seeded_store: TransactionStore) -> TestClient:
    return make_client(seeded_store)
