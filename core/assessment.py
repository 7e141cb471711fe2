# core/assessment.py
"""
Performance-assessment grid state.

One AssessmentGrid per mounted Performance Assessment screen. It holds:
  - 20 seeded rows (only the first `visible_row_count` are shown),
  - an edit overlay  {row_id: {field: text}},
  - rating selections {row_id: bucket value},
  - dropdown open state {"<bucket>-<row_id>": bool}.

Every cell read goes through get_effective_value() so the live table, the
printed report and the saved snapshot always agree.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import pandas as pd

from .utils import parse_score

MAX_ROWS = 20
INITIAL_VISIBLE_ROWS = 13

# (python name, JSON name, column heading)
FIELD_SPECS: List[Tuple[str, str, str]] = [
    ("college_section", "collegeSection", "College/Section"),
    ("activities",      "activities",     "Activities"),
    ("unit",            "unit",           "Unit"),
    ("target_values",   "targetValues",   "Target Values"),
    ("target_achieved", "targetAchieved", "Target Achieved"),
    ("staff_feedback",  "staffFeedback",  "Staff Feedback"),
    ("final_score",     "finalScore",     "Final Score"),
]
FIELDS = [f for f, _, _ in FIELD_SPECS]
JSON_NAMES = {f: j for f, j, _ in FIELD_SPECS}
HEADINGS = {f: h for f, _, h in FIELD_SPECS}

# Bucket tag -> (label, options). The ranges are sample values.
RATING_BUCKETS: Dict[str, Tuple[str, List[str]]] = {
    "ot":   ("OT",   ["100-95", "100-85"]),
    "vg":   ("VG",   ["94.99-90", "90-99"]),
    "good": ("Good", ["89.99-85", "80-90"]),
    "ni":   ("NI",   ["84.99-80", "80-70"]),
}

COLLEGE_SECTION_OPTIONS = [
    "Academics with Masters currently on campus",
    "Academics with PhD currently on campus",
    "International academics / Experts engaged",
    "Regular Professional Development Programme",
    "Quality of Administrative Services",
    "Quality of HR Services",
    "Features of Human Resource Management Module Used",
    "Academics having qualification in teaching higher education",
    "Academics enrolled in various long-term PD programme",
    "SOP and TAT implemented for all HR services",
    "APA ACTIVITIES",
    "Transparent/accountable & Integrity consciousness & culture strengthened",
    "College Activities",
]

ACTIVITIES_OPTIONS = [
    "Record of Masters faculty",
    "Record of PhD faculty",
    "Number",
    "Online seminars/webinars, face to face",
    "Staff Satisfaction",
    "Staff Survey Report",
    "Staff Profile, Staff Education, Recruitment, Appointments, Resignation",
    "Faculty with PgCHE",
    "Record of faculty who have availed long term PD",
    "1. Dedicated Service Award, 2. Recruitment & Selection, 3. Resignation & Superannuation, 4. Annual Increment",
    "APA Activities: 1. Evidences Maintained Accurately, 2. Guidelines Template Followed, "
    "3. Submission of Evidences on Time, 4. Updated APA 2025-2026",
    "AD focal person, Timely Asset Declaration, Feedback option, Integrity Vetting, "
    "Declaration of Conflict of Interest etc.",
    "",
]


@dataclass(frozen=True)
class AssessmentRow:
    id: str
    sl: int
    college_section: str = ""
    activities: str = ""
    unit: str = ""
    target_values: str = ""
    target_achieved: str = ""
    staff_feedback: str = ""
    final_score: str = ""


@dataclass(frozen=True)
class ReportRow:
    id: str
    sl: int
    college_section: str
    activities: str
    unit: str
    target_values: str
    target_achieved: str
    staff_feedback: str
    final_score: str
    rating_selection: Optional[str]

    def to_json(self) -> dict:
        out = {"id": self.id, "sl": self.sl}
        for f in FIELDS:
            out[JSON_NAMES[f]] = getattr(self, f)
        out["ratingSelection"] = self.rating_selection
        return out


@dataclass(frozen=True)
class ReportModel:
    rows: Tuple[ReportRow, ...]


def seed_rows(n: int = MAX_ROWS) -> List[AssessmentRow]:
    """Rows 1..n; the first len(lookup) rows get college/section + activity labels."""
    rows = []
    for i in range(n):
        rows.append(AssessmentRow(
            id=str(i + 1),
            sl=i + 1,
            college_section=COLLEGE_SECTION_OPTIONS[i] if i < len(COLLEGE_SECTION_OPTIONS) else "",
            activities=ACTIVITIES_OPTIONS[i] if i < len(ACTIVITIES_OPTIONS) else "",
        ))
    return rows


def dropdown_key(bucket: str, row_id: str) -> str:
    return f"{bucket}-{row_id}"


class AssessmentGrid:
    """Editable grid of MAX_ROWS assessment rows."""

    def __init__(self, rows: List[AssessmentRow] | None = None,
                 visible_row_count: int = INITIAL_VISIBLE_ROWS):
        self.rows: List[AssessmentRow] = list(rows) if rows is not None else seed_rows()
        self._by_id: Dict[str, AssessmentRow] = {r.id: r for r in self.rows}
        self.input_values: Dict[str, Dict[str, str]] = {}
        self.selected_values: Dict[str, str] = {}
        self.open_dropdowns: Dict[str, bool] = {}
        self.visible_row_count = min(int(visible_row_count), len(self.rows))

    # ---------------- reads ----------------
    def _row(self, row_id: str) -> AssessmentRow:
        try:
            return self._by_id[str(row_id)]
        except KeyError:
            raise KeyError(f"Unknown assessment row: {row_id!r}") from None

    def get_effective_value(self, row_id: str, field: str) -> str:
        _check_field(field)
        row = self._row(row_id)
        edited = self.input_values.get(row.id, {}).get(field)
        if edited:
            return edited
        return getattr(row, field) or ""

    def display_target(self, row_id: str) -> str:
        """A rating selection wins over the free-text target value."""
        sel = self.selected_values.get(str(row_id))
        return sel if sel else self.get_effective_value(row_id, "target_values")

    def is_dropdown_open(self, key: str) -> bool:
        return bool(self.open_dropdowns.get(key, False))

    def visible_rows(self) -> List[AssessmentRow]:
        return self.rows[: self.visible_row_count]

    @property
    def can_add_row(self) -> bool:
        return self.visible_row_count < len(self.rows)

    # ---------------- writes ----------------
    def set_field_value(self, row_id: str, field: str, value: str) -> None:
        _check_field(field)
        rid = self._row(row_id).id
        new_row_edits = dict(self.input_values.get(rid, {}))
        new_row_edits[field] = "" if value is None else str(value)
        overlay = dict(self.input_values)
        overlay[rid] = new_row_edits
        self.input_values = overlay

    def toggle_dropdown(self, key: str) -> None:
        state = dict(self.open_dropdowns)
        state[key] = not state.get(key, False)
        self.open_dropdowns = state

    def select_rating(self, row_id: str, value: str, key: str | None = None) -> None:
        """Set the row's one rating selection, then close the dropdown that made it."""
        rid = self._row(row_id).id
        selected = dict(self.selected_values)
        selected[rid] = value
        self.selected_values = selected
        if key is not None:
            self.toggle_dropdown(key)

    def add_row(self) -> None:
        if self.visible_row_count < len(self.rows):
            self.visible_row_count += 1

    # ---------------- projection ----------------
    def build_report_model(self) -> ReportModel:
        out = []
        for r in self.rows:
            vals = {f: self.get_effective_value(r.id, f) for f in FIELDS}
            vals["target_values"] = self.display_target(r.id)
            out.append(ReportRow(
                id=r.id,
                sl=r.sl,
                rating_selection=self.selected_values.get(r.id) or None,
                **vals,
            ))
        return ReportModel(rows=tuple(out))


def _check_field(field: str) -> None:
    if field not in JSON_NAMES:
        raise ValueError(f"Unknown assessment field: {field!r}")


# ---------------- table helpers (screens/performance_assessment.py) ----------------

def table_frame(grid: AssessmentGrid) -> pd.DataFrame:
    """Visible rows as a DataFrame for st.data_editor (index = row id)."""
    recs = []
    for r in grid.visible_rows():
        rec = {"SL": r.sl}
        for f in FIELDS:
            rec[f] = grid.display_target(r.id) if f == "target_values" else grid.get_effective_value(r.id, f)
        recs.append(rec)
    df = pd.DataFrame(recs, columns=["SL"] + FIELDS, index=[r.id for r in grid.visible_rows()])
    df.index.name = "id"
    return df


def _cell_text(v) -> str:
    return "" if v is None or (isinstance(v, float) and pd.isna(v)) else str(v)


def apply_table_edits(grid: AssessmentGrid, edited: pd.DataFrame) -> int:
    """
    Push every changed cell of an edited table through set_field_value.
    Returns the number of cells written.

    Target Values is read-only on rows that carry a rating, and a cell whose
    overlay already holds the typed text is not written again.
    """
    if edited is None or edited.empty:
        return 0
    current = table_frame(grid)
    changed = 0
    for rid in edited.index:
        rid = str(rid)
        if rid not in current.index:
            continue
        for f in FIELDS:
            if f not in edited.columns:
                continue
            if f == "target_values" and grid.selected_values.get(rid):
                continue
            new = _cell_text(edited.at[rid, f])
            if new == str(current.at[rid, f]):
                continue
            if grid.input_values.get(rid, {}).get(f) == new:
                continue
            grid.set_field_value(rid, f, new)
            changed += 1
    return changed


def table_in_sync(grid: AssessmentGrid, edited: pd.DataFrame) -> bool:
    """True when every editable cell of `edited` shows what table_frame() shows now."""
    if edited is None or edited.empty:
        return True
    current = table_frame(grid)
    for rid in edited.index:
        rid = str(rid)
        if rid not in current.index:
            continue
        for f in FIELDS:
            if f in edited.columns and _cell_text(edited.at[rid, f]) != str(current.at[rid, f]):
                return False
    return True


def summarize(grid: AssessmentGrid) -> dict:
    """Numbers for the summary cards under the grid."""
    met = below = 0
    scores = []
    for r in grid.visible_rows():
        target = parse_score(grid.display_target(r.id))
        achieved = parse_score(grid.get_effective_value(r.id, "target_achieved"))
        if target is not None and achieved is not None:
            if achieved >= target:
                met += 1
            else:
                below += 1
        score = parse_score(grid.get_effective_value(r.id, "final_score"))
        if score is not None:
            scores.append(score)
    return {
        "total_activities": grid.visible_row_count,
        "targets_met": met,
        "below_target": below,
        "average_score": round(sum(scores) / len(scores), 1) if scores else 0.0,
    }
