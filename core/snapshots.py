# core/snapshots.py
from __future__ import annotations
import json
import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from .assessment import AssessmentGrid, ReportModel
from .auth import AuthUser
from .db import get_conn, read_df

logger = logging.getLogger(__name__)

KEY_PREFIX = "performance_assessment"


def snapshot_key(user_id: str, ts_ms: int) -> str:
    return f"{KEY_PREFIX}_{user_id}_{int(ts_ms)}"


class SnapshotStore:
    """Best-effort key/value store over the local SQLite file. No retries."""

    def put(self, key: str, value: str, *, user_id: str = "") -> Tuple[bool, str]:
        try:
            with get_conn() as conn:
                conn.execute(
                    "INSERT OR REPLACE INTO snapshots(key, user_id, created_at, value) VALUES(?,?,?,?)",
                    (key, user_id, datetime.now(timezone.utc).isoformat(), value),
                )
            return True, "Assessment saved successfully!"
        except Exception as e:
            logger.exception("Snapshot write failed for %s", key)
            return False, f"Error saving assessment. Please try again. ({e})"

    def get(self, key: str) -> Optional[dict]:
        df = read_df("SELECT value FROM snapshots WHERE key=?", (key,))
        if df.empty:
            return None
        return json.loads(df.iloc[0]["value"])

    def keys_for_user(self, user_id: str) -> List[str]:
        df = read_df(
            "SELECT key FROM snapshots WHERE user_id=? ORDER BY created_at DESC, key DESC",
            (user_id,),
        )
        return df["key"].tolist() if not df.empty else []


def build_snapshot_payload(model: ReportModel, grid: AssessmentGrid,
                           user: AuthUser, now: datetime) -> dict:
    return {
        "staffMember": {"name": user.display_name, "email": user.email},
        "assessmentDate": now.isoformat(),
        "assessments": [r.to_json() for r in model.rows],
        "selectedValues": dict(grid.selected_values),
        "inputValues": {rid: dict(v) for rid, v in grid.input_values.items()},
    }


def save_assessment(grid: AssessmentGrid, user: AuthUser, store: SnapshotStore,
                    now: datetime | None = None,
                    model: ReportModel | None = None) -> Tuple[bool, str]:
    """Snapshot the grid under performance_assessment_<user>_<epoch ms>. Grid state is never modified."""
    now = now or datetime.now(timezone.utc)
    model = model or grid.build_report_model()
    payload = build_snapshot_payload(model, grid, user, now)
    key = snapshot_key(user.id, int(now.timestamp() * 1000))
    ok, msg = store.put(key, json.dumps(payload), user_id=user.id)
    if ok:
        logger.info("Saved assessment snapshot %s", key)
    return ok, msg
