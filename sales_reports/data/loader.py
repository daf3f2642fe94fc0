"""
Seed dataset fetching and full-collection replacement.
"""
from __future__ import annotations

import logging

import requests

from sales_reports.config import SEED_URL, SEED_TIMEOUT
from sales_reports.data.normalize import normalize_transactions

logger = logging.getLogger(__name__)


class LoadError(RuntimeError):
    """The seed dataset could not be fetched or parsed."""


def fetch_dataset(url: str = SEED_URL, timeout: float = SEED_TIMEOUT) -> list[dict]:
    """Download the seed dataset (a JSON array of transaction items)."""
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        payload = resp.json()
    except requests.RequestException as exc:
        raise LoadError(f"Failed to fetch {url}: {exc}") from exc
    except ValueError as exc:
        raise LoadError(f"Seed dataset at {url} is not valid JSON") from exc

    if not isinstance(payload, list):
        raise LoadError(f"Seed dataset must be a JSON array, got {type(payload).__name__}")
    return payload


def seed(store, url: str = SEED_URL, timeout: float = SEED_TIMEOUT) -> int:
    """Fetch, normalise and replace the whole collection. Returns rows inserted.

    Delete-all then insert-all; a failure between the two leaves the
    collection empty.
    """
    logger.info("Seeding transactions from %s", url)
    items = fetch_dataset(url, timeout)
    try:
        records = normalize_transactions(items)
    except (TypeError, ValueError, KeyError) as exc:
        raise LoadError(f"Seed dataset could not be normalised: {exc}") from exc

    inserted = store.replace_all(records)
    logger.info("Seeded %d transactions", inserted)
    return inserted
