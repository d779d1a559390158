import os
from decimal import Decimal
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILENAME = os.getenv("LOG_FILENAME", "stock_manager.log")
LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024)))  # 5 MB
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "3"))

# --- Session Defaults ---
LOAD_SEED_DATA = os.getenv("LOAD_SEED_DATA", "true").lower() in ("1", "true", "yes")

# --- Report Formatting ---
REPORT_TIMESTAMP_FORMAT = os.getenv(
    "REPORT_TIMESTAMP_FORMAT", "%m/%d/%Y, %I:%M:%S %p"
)
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")
REPORT_FILENAME_PREFIX = "stock_report_"
REPORT_MIME_TYPE = "text/plain"

# --- Item Limits ---
# Keeps every quantity * price sum well inside Decimal's 28-digit precision.
MAX_QUANTITY = int(os.getenv("MAX_QUANTITY", "1000000000"))
MAX_PRICE = Decimal(os.getenv("MAX_PRICE", "1000000000"))

# Sentinel meaning "no category restriction". Never a real category value.
ALL_CATEGORY = "All"

# --- Seed Data ---
# Loaded into a fresh session when LOAD_SEED_DATA is on.
SEED_ITEMS = [
    {
        "id": 1,
        "name": "Widget A",
        "quantity": 50,
        "price": Decimal("9.99"),
        "category": "Electronics",
    },
    {
        "id": 2,
        "name": "Gadget B",
        "quantity": 30,
        "price": Decimal("19.99"),
        "category": "Electronics",
    },
    {
        "id": 3,
        "name": "Doohickey C",
        "quantity": 20,
        "price": Decimal("14.99"),
        "category": "Tools",
    },
]
