"""TransactionStore and filter-builder tests (mongomock backed)."""

from __future__ import annotations

import pytest

from sales_reports.data.normalize import normalize_transactions
from sales_reports.data.schemas import BUCKETS
from sales_reports.data.store import (
    TransactionStore,
    bucket_filter,
    month_filter,
    parse_price,
    search_filter,
)
from tests.fakes import MARCH_SALES, MARCH_TOTAL, SAMPLE_ITEMS


class TestFilterBuilders:
    def test_month_filter(self) -> None:
        assert month_filter(3) == {"saleMonth": 3}

    def test_empty_search_is_month_only(self) -> None:
        assert search_filter(3, "") == {"saleMonth": 3}
        assert search_filter(3, "   ") == {"saleMonth": 3}

    def test_text_search_matches_title_or_description(self) -> None:
        query = search_filter(3, "jacket")
        assert query["saleMonth"] == 3
        assert query["$or"] == [
            {"title": {"$regex": "jacket", "$options": "i"}},
            {"description": {"$regex": "jacket", "$options": "i"}},
        ]

    def test_numeric_search_adds_price_clause(self) -> None:
        query = search_filter(3, " 64 ")
        assert {"price": 64.0} in query["$or"]
        assert len(query["$or"]) == 3

    def test_search_text_is_escaped(self) -> None:
        query = search_filter(3, "a.b(")
        assert query["$or"][0]["title"]["$regex"] == r"a\.b\("

    @pytest.mark.parametrize("text,expected", [
        ("64", 64.0), ("  12.5 ", 12.5), ("1e3", 1000.0), ("-3", -3.0),
        ("", None), ("abc", None), ("nan", None), ("inf", None),
    ])
    def test_parse_price(self, text: str, expected) -> None:
        assert parse_price(text) == expected

    def test_bucket_filter(self) -> None:
        assert bucket_filter(4, BUCKETS[2]) == {"saleMonth": 4, "price": {"$gt": 200, "$lte": 300}}


class TestReplaceAll:
    def test_replace_all_swaps_the_whole_collection(self, store: TransactionStore) -> None:
        store.replace_all(normalize_transactions(SAMPLE_ITEMS))
        assert store.count() == len(SAMPLE_ITEMS)

        inserted = store.replace_all(normalize_transactions(SAMPLE_ITEMS[:2]))
        assert inserted == 2
        assert store.count() == 2

    def test_replace_all_with_nothing_empties_collection(self, seeded_store: TransactionStore) -> None:
        assert seeded_store.replace_all([]) == 0
        assert seeded_store.count() == 0

    def test_replace_all_indexes_sale_month(self, seeded_store: TransactionStore) -> None:
        index_keys = [list(ix["key"]) for ix in seeded_store.collection.index_information().values()]
        assert any(keys[0][0] == "saleMonth" for keys in index_keys)


class TestQueries:
    def test_find_pages_in_insertion_order(self, seeded_store: TransactionStore) -> None:
        page1 = seeded_store.find(month_filter(3), skip=0, limit=2)
        page3 = seeded_store.find(month_filter(3), skip=4, limit=2)
        assert [d["title"] for d in page1] == ["Mens Cotton Jacket", "Solid Gold Petite Micropave"]
        assert [d["title"] for d in page3] == ["Rain Jacket Women Windbreaker"]

    def test_find_without_limit_returns_everything(self, seeded_store: TransactionStore) -> None:
        assert len(seeded_store.find(month_filter(3))) == MARCH_TOTAL

    def test_month_filter_ignores_year(self, seeded_store: TransactionStore) -> None:
        years = {d["dateOfSale"].year for d in seeded_store.find(month_filter(3))}
        assert years == {2021, 2022}

    def test_total_sales(self, seeded_store: TransactionStore) -> None:
        assert seeded_store.total_sales(3) == pytest.approx(MARCH_SALES)

    def test_total_sales_is_zero_for_empty_month(self, seeded_store: TransactionStore) -> None:
        assert seeded_store.total_sales(1) == 0

    def test_count_sold(self, seeded_store: TransactionStore) -> None:
        assert seeded_store.count_sold(3, True) == 3
        assert seeded_store.count_sold(3, False) == 2

    def test_count_in_bucket(self, seeded_store: TransactionStore) -> None:
        assert seeded_store.count_in_bucket(3, BUCKETS[0]) == 3
        assert seeded_store.count_in_bucket(3, BUCKETS[1]) == 1
        assert seeded_store.count_in_bucket(3, BUCKETS[-1]) == 1

    def test_category_counts_sorted_by_category(self, seeded_store: TransactionStore) -> None:
        assert seeded_store.category_counts(3) == [
            {"category": "electronics", "count": 2},
            {"category": "jewelery", "count": 1},
            {"category": "men's clothing", "count": 1},
            {"category": "women's clothing", "count": 1},
        ]

    def test_missing_category_passes_through(self, store: TransactionStore) -> None:
        store.replace_all(normalize_transactions([
            {"title": "x", "price": 5, "sold": True, "dateOfSale": "2022-06-01T00:00:00Z"},
            {"title": "y", "price": 5, "sold": True, "category": "toys", "dateOfSale": "2022-06-02T00:00:00Z"},
        ]))
        assert store.category_counts(6) == [
            {"category": None, "count": 1},
            {"category": "toys", "count": 1},
        ]
