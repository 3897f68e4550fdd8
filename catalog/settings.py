"""
Runtime settings read from the environment, with defaults for local runs.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]  # project root

# Catalog source (JSON array of movie objects)
CATALOG_DATA_PATH = Path(os.getenv("CATALOG_DATA_PATH", str(BASE_DIR / "data" / "movies.json")))

# loguru level for the stderr sink
CATALOG_LOG_LEVEL = os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()

# Where the Streamlit UI expects the API
CATALOG_API_URL = os.getenv("CATALOG_API_URL", "http://localhost:8000")
