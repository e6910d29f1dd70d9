# storefront/config/settings.py

"""Central configuration for the storefront browser."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the storefront browser."""

    # --- Data sources ---
    # Published CSV of the shop directory; unset -> built-in sample shops
    SHOP_DIRECTORY_URL: str | None = (
        os.getenv("SHOP_DIRECTORY_URL") or None
    )
    SHEET_EXPORT_URL: str = (
        "https://docs.google.com/spreadsheets/d/"
        "{sheet_id}/pub?output=csv"
    )
    MOCK_SHEET_PREFIX: str = "mock-sheet-"
    MOCK_LATENCY: float = 0.5           # Simulated network delay (secs)

    # --- HTTP ---
    REQUEST_TIMEOUT: int = 15           # Seconds before a request times out
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "text/csv,text/plain;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Sorting ---
    DEFAULT_SORT: str = "price-low-high"
    SORT_MODES: list[dict[str, str]] = [
        {"id": "price-low-high", "label": "Price: Low to High"},
        {"id": "price-high-low", "label": "Price: High to Low"},
        {"id": "alphabetical-a-z", "label": "Alphabetical: A-Z"},
        {"id": "alphabetical-z-a", "label": "Alphabetical: Z-A"},
    ]

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
