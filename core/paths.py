# core/paths.py

import os
from pathlib import Path

# Base directory for all runtime data, overridable in tests
BASE_DATA_DIR = Path(os.getenv("DATA_DIR", "data"))

# Default JSON config
CONFIG_PATH = Path(os.getenv("SCANNER_CONFIG", "config/scanner_config.json"))

# Optional .env with SCANNER_* overrides
ENV_PATH = Path("secrets/.env")

# Structured logging NDJSON file + archive dir
STRUCT_LOG_DIR     = BASE_DATA_DIR / "logs"
STRUCT_LOG_FILE    = STRUCT_LOG_DIR / "reader_events.ndjson"
STRUCT_LOG_ARCHIVE = STRUCT_LOG_DIR / "archive"
