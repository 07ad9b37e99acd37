# hostel/config.py
from __future__ import annotations
import logging
import os

from dotenv import load_dotenv

load_dotenv()

# --- Configuration ---
API_URL      = os.getenv("HOSTEL_API_URL", "http://localhost:8080").rstrip("/")
HOST         = os.getenv("HOSTEL_HOST", "0.0.0.0")
PORT         = int(os.getenv("HOSTEL_PORT", "8080"))
DB_PATH      = os.getenv("HOSTEL_DB_PATH", os.path.join("data", "rooms.json"))
HTTP_TIMEOUT = float(os.getenv("HOSTEL_HTTP_TIMEOUT", "10"))
LOG_LEVEL    = os.getenv("HOSTEL_LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
