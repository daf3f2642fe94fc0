"""
Sales Reports — FastAPI app factory with startup store connection.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from sales_reports.logging_config import setup_logging
from sales_reports.data.store import TransactionStore
from sales_reports.api.dependencies import set_store
from sales_reports.api.errors import register_error_handlers
from sales_reports.api.router_meta import router as meta_router
from sales_reports.api.router_transactions import router as transactions_router
from sales_reports.api.router_charts import router as charts_router
from sales_reports.api.router_export import router as export_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the process-wide store handle once."""
    from sales_reports.config import REPORTS_FOLDER
    REPORTS_FOLDER.mkdir(parents=True, exist_ok=True)

    store = TransactionStore.connect()
    set_store(store)
    logger.info("Sales Reports ready — collection %s", store.collection.full_name)
    yield
    set_store(None)
    store.collection.database.client.close()


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title="Sales Reports API",
        description="Monthly transaction listing, statistics, and chart data",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(meta_router)
    app.include_router(transactions_router)
    app.include_router(charts_router)
    app.include_router(export_router)

    # Serve dashboard with no-cache headers so browsers always get fresh JS
    static_dir = Path(__file__).parent / "static"
    if static_dir.is_dir():
        index_html = static_dir / "index.html"

        @app.get("/", response_class=HTMLResponse, include_in_schema=False)
        async def serve_index():
            return HTMLResponse(
                content=index_html.read_text(encoding="utf-8"),
                headers={"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache"},
            )

        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    return app


app = create_app()
