# core/utils.py
from __future__ import annotations
import io
import re
import pandas as pd

# ---------------- CSV / bytes helpers ----------------

def df_to_csv_bytes(df: pd.DataFrame) -> bytes:
    if df is None or df.empty:
        df = pd.DataFrame()
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8-sig")

# ---------------- text helpers ----------------

def normalize_whitespace(s: str) -> str:
    return " ".join(str(s or "").split())

def initials(name: str) -> str:
    """'Sonam Wangmo' -> 'SW'. Empty name gives ''."""
    return "".join(part[0].upper() for part in normalize_whitespace(name).split(" ") if part)

def contains_ci(haystack, needle: str) -> bool:
    """Case-insensitive substring test; empty needle always matches."""
    return str(needle or "").lower() in str(haystack or "").lower()

# ---------------- number helpers ----------------

_NUM = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(?:-\s*(-?\d+(?:\.\d+)?)\s*)?%?\s*$")

def parse_score(raw) -> float | None:
    """
    Parse a free-text score cell.
      '85'       -> 85.0
      '92.5%'    -> 92.5
      '100-95'   -> 95.0   (range: lower bound)
      'n/a', ''  -> None
    """
    if raw is None:
        return None
    m = _NUM.match(str(raw))
    if not m:
        return None
    a = float(m.group(1))
    if m.group(2) is None:
        return a
    return min(a, float(m.group(2)))
