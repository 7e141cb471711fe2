# core/config.py
from __future__ import annotations
import logging
import os
from pathlib import Path

# ---------------- Storage ----------------
DB_PATH = Path(os.environ.get("IWP_DB_PATH", "iwp.db"))

# ---------------- Logging ----------------
LOG_LEVEL = os.environ.get("IWP_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# ---------------- Local dev identity ----------------
# When IWP_DEV_USER_EMAIL is set the identity provider is bypassed.
DEV_USER_EMAIL = os.environ.get("IWP_DEV_USER_EMAIL", "").strip()
DEV_USER_ID = os.environ.get("IWP_DEV_USER_ID", "dev-user").strip()
DEV_USER_FIRST_NAME = os.environ.get("IWP_DEV_USER_FIRST_NAME", "").strip()
DEV_USER_LAST_NAME = os.environ.get("IWP_DEV_USER_LAST_NAME", "").strip()

APP_NAME = "IWP Management System"
APP_VERSION = "v1.0.0"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once per process (Streamlit reruns call this repeatedly)."""
    root = logging.getLogger()
    if getattr(root, "_iwp_configured", False):
        return
    logging.basicConfig(level=(level or LOG_LEVEL), format=LOG_FORMAT)
    root._iwp_configured = True  # type: ignore[attr-defined]
