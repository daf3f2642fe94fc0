"""
Monthly Sales Report — Summary KPIs, price ranges, categories, full listing.
"""
from __future__ import annotations

from pathlib import Path

from sales_reports.data.store import TransactionStore, month_filter
from sales_reports.data.schemas import month_label
from sales_reports.analytics.common import serialize_transaction
from sales_reports.analytics.monthly import combined
from sales_reports.excel.writer import ExcelWriter


TRANSACTION_COLUMNS = [
    ("title", "text", "Title"),
    ("category", "text", "Category"),
    ("price", "currency", "Price"),
    ("dateOfSale", "date", "Date of Sale"),
    ("soldLabel", "text", "Sold"),
]


def _sold_label(sold) -> str:
    if sold is None:
        return "Unknown"
    return "Yes" if sold else "No"


def generate_json(store: TransactionStore, month: int) -> dict:
    docs = store.find(month_filter(month))
    return {
        "month": month_label(month),
        **combined(store, month),
        "transactions": [serialize_transaction(d) for d in docs],
    }


def generate_excel(store: TransactionStore, month: int, output_path: str | Path) -> Path:
    data = combined(store, month)
    docs = store.find(month_filter(month))
    label = month_label(month)
    ew = ExcelWriter()

    ws = ew.add_sheet("Summary")
    row = ew.write_title(ws, "TRANSACTION DASHBOARD", f"Monthly Sales Report  |  {label}")
    row = ew.write_section(ws, row, "STATISTICS")
    stats = data["statistics"]
    ew.write_kpi_row(ws, row, [
        (stats["totalSales"], "Total Sales", "currency"),
        (stats["totalItemsSold"], "Items Sold", "number"),
        (stats["totalItemsNotSold"], "Items Not Sold", "number"),
    ])

    ws_bar = ew.add_sheet("Price Ranges")
    ew.write_table(ws_bar, 1, [
        ("range", "text", "Price Range"),
        ("count", "number", "Items"),
    ], data["barChart"], show_total=True)

    ws_pie = ew.add_sheet("Categories")
    pie_rows = [{"category": r["category"] or "(none)", "count": r["count"]} for r in data["pieChart"]]
    ew.write_table(ws_pie, 1, [
        ("category", "text", "Category"),
        ("count", "number", "Items"),
    ], pie_rows, show_total=True)

    ws_tx = ew.add_sheet("Transactions")
    rows = [{**d, "soldLabel": _sold_label(d.get("sold"))} for d in docs]
    ew.write_table(ws_tx, 1, TRANSACTION_COLUMNS, rows)

    return ew.save(output_path)
