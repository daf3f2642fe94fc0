"""Seed loading, normalization, and the MongoDB-backed query layer."""
from .loader import fetch_dataset, seed, LoadError
from .store import TransactionStore
from .schemas import BUCKETS, InvalidMonthError, month_index
from .normalize import normalize_columns, normalize_transactions
