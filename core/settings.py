# core/settings.py
from __future__ import annotations
import json
import logging
from datetime import datetime, timezone
from typing import Dict, Tuple

from .db import get_conn, read_df, ensure_base_schema

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_SETTINGS: Dict = {
    "site_name": "IWP Management System",
    "email_notifications": True,
    "auto_backup": True,
    "maintenance_mode": False,
    "user_registration": True,
    "review_deadline": "14",
    "max_file_size": "10",
}

DEFAULT_STAFF_SETTINGS: Dict = {
    "staff_name": "",
    "staff_id_no": "",
    "position_level": "",
    "appraisal_period": "",
    "position_title": "",
    "college": "",
    "division": "",
}

POSITION_LEVELS = [
    "Junior Lecturer", "Lecturer", "Senior Lecturer", "Associate Professor",
    "Professor", "Administrative Staff", "Technical Staff",
]
APPRAISAL_PERIODS = [
    "January - December 2024", "January - December 2025",
    "July 2024 - June 2025", "July 2025 - June 2026",
]
COLLEGES = [
    "College of Computing and Informatics", "College of Engineering", "College of Business",
    "College of Science", "College of Arts and Social Sciences", "College of Medicine",
    "College of Education",
]
DIVISIONS = [
    "Academic Division", "Administrative Division", "Research Division",
    "Student Affairs Division", "Finance Division", "Human Resources Division",
    "IT Services Division", "Library Services Division",
]


def _load(name: str, defaults: Dict) -> Dict:
    df = read_df("SELECT value FROM app_settings WHERE name=?", (name,))
    out = dict(defaults)
    if not df.empty:
        try:
            stored = json.loads(df.iloc[0]["value"])
        except ValueError:
            logger.warning("Ignoring unreadable %s settings row", name)
            stored = {}
        # unknown keys from older versions are dropped
        out.update({k: v for k, v in stored.items() if k in defaults})
    return out

def get_settings() -> Tuple[Dict, Dict]:
    """Return (system, staff) settings, defaults filled in."""
    ensure_base_schema()
    return _load("system", DEFAULT_SYSTEM_SETTINGS), _load("staff", DEFAULT_STAFF_SETTINGS)

def save_settings(system: Dict, staff: Dict) -> Tuple[bool, str]:
    ensure_base_schema()
    now = datetime.now(timezone.utc).isoformat()
    sys_clean = {k: system.get(k, v) for k, v in DEFAULT_SYSTEM_SETTINGS.items()}
    staff_clean = {k: staff.get(k, v) for k, v in DEFAULT_STAFF_SETTINGS.items()}
    try:
        with get_conn() as conn:
            cur = conn.cursor()
            for name, val in (("system", sys_clean), ("staff", staff_clean)):
                cur.execute(
                    "INSERT OR REPLACE INTO app_settings(name, value, updated_at) VALUES(?,?,?)",
                    (name, json.dumps(val), now),
                )
            conn.commit()
    except Exception as e:
        logger.exception("Saving settings failed")
        return False, f"Save failed: {e}"
    logger.info("Settings saved (site_name=%r)", sys_clean["site_name"])
    return True, "Settings saved successfully!"

def reset_settings() -> Tuple[Dict, Dict]:
    """Defaults for both groups. Nothing is written until save_settings()."""
    return dict(DEFAULT_SYSTEM_SETTINGS), dict(DEFAULT_STAFF_SETTINGS)
