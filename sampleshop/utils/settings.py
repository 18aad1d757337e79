# sampleshop/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

# spreadsheet integration (Apps Script web app urls)
SHEETS_WEBHOOK_URL = os.getenv("SHEETS_WEBHOOK_URL", "")
SHEETS_FETCH_URL = os.getenv("SHEETS_FETCH_URL", "")

MAX_QUANTITY = int(os.getenv("MAX_QUANTITY", 2))
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", 10))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", 8000))

# idle carts are dropped after this many seconds
CART_TTL_SECONDS = int(os.getenv("CART_TTL_SECONDS", 2 * 60 * 60))
