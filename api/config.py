"""Configuration module relying on environment variables.

Loads variables from a `.env` file at the repository root using python-dotenv
and exposes constants shared by the web UI and the API.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Resolve repository root directory
ROOT_DIR = Path(__file__).resolve().parent.parent

# Load variables from .env at the project root
load_dotenv(ROOT_DIR / ".env")

# Optional YAML file with extra exercises and tutorials
CONTENT_PATH = ROOT_DIR / os.getenv("CONTENT_PATH", "data/content.yaml")

# Largest editor text accepted by POST /analyze
MAX_SOURCE_CHARS = int(os.getenv("MAX_SOURCE_CHARS", "20000"))

# Address served by `python -m api.main`
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DISABLE_GRADIO_SHARE = os.getenv("DISABLE_GRADIO_SHARE", "").lower() in ("1", "true", "yes")
