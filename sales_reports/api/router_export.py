"""
Excel export of the monthly report.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse
from pymongo.errors import PyMongoError

from sales_reports.config import REPORTS_FOLDER
from sales_reports.data.store import TransactionStore
from sales_reports.data.schemas import month_label
from sales_reports.reports import monthly_report
from sales_reports.api.dependencies import get_store, month_from_path
from sales_reports.api.errors import ServerError

router = APIRouter(tags=["export"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("/export/{month}")
def export_month(
    month: int = Depends(month_from_path),
    store: TransactionStore = Depends(get_store),
):
    out_path = REPORTS_FOLDER / f"Sales_Report_{month_label(month)}.xlsx"
    try:
        monthly_report.generate_excel(store, month, out_path)
    except PyMongoError as exc:
        raise ServerError("Error exporting report", exc)
    return FileResponse(path=str(out_path), filename=out_path.name, media_type=XLSX_MEDIA_TYPE)
