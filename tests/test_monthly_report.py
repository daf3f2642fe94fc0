"""Monthly Excel/JSON report tests."""

from __future__ import annotations

import openpyxl
import pytest

from sales_reports.data.store import TransactionStore
from sales_reports.reports.monthly_report import generate_excel, generate_json
from tests.fakes import MARCH_SALES, MARCH_TOTAL


def test_generate_json(seeded_store: TransactionStore) -> None:
    data = generate_json(seeded_store, 3)

    assert data["month"] == "March"
    assert set(data) == {"month", "statistics", "barChart", "pieChart", "transactions"}
    assert len(data["transactions"]) == MARCH_TOTAL


def test_generate_excel_sheets(seeded_store: TransactionStore, tmp_path) -> None:
    path = generate_excel(seeded_store, 3, tmp_path / "nested" / "report.xlsx")

    wb = openpyxl.load_workbook(path)
    assert wb.sheetnames == ["Summary", "Price Ranges", "Categories", "Transactions"]

    summary = wb["Summary"]
    assert summary["A1"].value == "TRANSACTION DASHBOARD"
    assert "March" in summary["A2"].value
    assert summary["A6"].value == pytest.approx(MARCH_SALES)
    assert summary["A7"].value == "Total Sales"
    assert summary["C6"].value == 3
    assert summary["E6"].value == 2

    tx = wb["Transactions"]
    assert [c.value for c in tx[1]] == ["Title", "Category", "Price", "Date of Sale", "Sold"]
    assert tx.max_row == MARCH_TOTAL + 1

    ranges = wb["Price Ranges"]
    assert ranges["A2"].value == "0-100"
    assert ranges["B2"].value == 3
    assert ranges["A12"].value == "TOTAL"
    assert ranges["B12"].value == MARCH_TOTAL


def test_generate_excel_empty_month(seeded_store: TransactionStore, tmp_path) -> None:
    path = generate_excel(seeded_store, 1, tmp_path / "january.xlsx")

    wb = openpyxl.load_workbook(path)
    assert wb["Transactions"].max_row == 1
