"""
Sales Reports — Configuration: connection targets, paths, constants.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# MongoDB: the only persisted configuration is the store connection target
# ---------------------------------------------------------------------------
MONGO_URI = os.environ.get("MONGO_URI", "mongodb://127.0.0.1:27017")
MONGO_DB = os.environ.get("MONGO_DB", "mern-assignment")
MONGO_COLLECTION = os.environ.get("MONGO_COLLECTION", "transactions")

# ---------------------------------------------------------------------------
# Seed dataset
# ---------------------------------------------------------------------------
SEED_URL = os.environ.get(
    "SEED_URL", "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
)
SEED_TIMEOUT = float(os.environ.get("SEED_TIMEOUT", "30"))

# ---------------------------------------------------------------------------
# Paths: override with SALES_REPORTS_DATA_DIR for cloud deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("SALES_REPORTS_DATA_DIR", str(Path.home() / "Sales Reports")))
BASE_FOLDER = _data_dir
REPORTS_FOLDER = _data_dir / "reports"

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Calendar: full English month names, index + 1 == month number
# ---------------------------------------------------------------------------
MONTH_NAMES = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]

# ---------------------------------------------------------------------------
# Bar-chart price buckets: (lower, upper); upper None means unbounded
# ---------------------------------------------------------------------------
PRICE_BUCKETS = [
    (0, 100),
    (101, 200),
    (201, 300),
    (301, 400),
    (401, 500),
    (501, 600),
    (601, 700),
    (701, 800),
    (801, 900),
    (901, None),
]

# ---------------------------------------------------------------------------
# Listing defaults
# ---------------------------------------------------------------------------
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10

# Raw dataset keys kept on each stored transaction
TRANSACTION_FIELDS = ["title", "description", "price", "dateOfSale", "category", "sold", "image"]
