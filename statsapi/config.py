"""Service configuration, read once from environment variables."""
from __future__ import annotations

import os
from pathlib import Path

HOST = os.environ.get("HOST", "0.0.0.0")  # Bind address for uvicorn
PORT = int(os.environ.get("PORT", 5000))  # Listen port for uvicorn
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()  # Root logger level
ACCESS_LOG = os.environ.get("ACCESS_LOG", "1") != "0"  # uvicorn per-request access log

DEFAULT_BINS = int(os.environ.get("DEFAULT_BINS", 10))  # Histogram bins when the request omits them
MAX_BINS = int(os.environ.get("MAX_BINS", 1000))  # Upper bound accepted for 'bins'

UPLOAD_DIR = Path(os.environ.get("UPLOAD_DIR", "uploads"))  # Where uploaded CSVs live while parsed
MAX_UPLOAD_BYTES = int(os.environ.get("MAX_UPLOAD_BYTES", 10 * 1024 * 1024))  # 10 MiB

# Comma-separated list of allowed origins, "*" allows any
CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]
