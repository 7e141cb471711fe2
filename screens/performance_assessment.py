# screens/performance_assessment.py
from __future__ import annotations
from datetime import datetime

import streamlit as st

from core.assessment import (
    FIELDS,
    HEADINGS,
    MAX_ROWS,
    RATING_BUCKETS,
    AssessmentGrid,
    apply_table_edits,
    dropdown_key,
    summarize,
    table_frame,
    table_in_sync,
)
from core.auth import AuthUser
from core.branding import render_header, render_footer
from core.report import StreamlitPrintSurface, print_report, render_report_html, report_frame
from core.snapshots import SnapshotStore, save_assessment
from core.theme import render_theme_css
from core.utils import df_to_csv_bytes

GRID_KEY = "pa_grid"
EDITOR_REV_KEY = "pa_editor_rev"

_PLACEHOLDERS = {
    "college_section": "Enter college/section",
    "activities": "Enter activities",
    "unit": "Unit",
    "target_values": "Target",
    "target_achieved": "Achieved",
    "staff_feedback": "Enter staff feedback",
    "final_score": "Score",
}


def _grid() -> AssessmentGrid:
    """One grid per session, created with defaults on first mount."""
    if GRID_KEY not in st.session_state:
        st.session_state[GRID_KEY] = AssessmentGrid()
    return st.session_state[GRID_KEY]


def _reset_editor():
    """Drop the data editor's pending cell edits so it redraws from table_frame()."""
    st.session_state[EDITOR_REV_KEY] = st.session_state.get(EDITOR_REV_KEY, 0) + 1


def _toolbar(grid: AssessmentGrid, user: AuthUser):
    c1, c2, _ = st.columns([1, 1, 4])
    with c1:
        if st.button("Save Assessment", use_container_width=True):
            ok, msg = save_assessment(grid, user, SnapshotStore())
            if ok:
                st.success(msg)
            else:
                st.error(msg)
    with c2:
        if st.button("Print Report", use_container_width=True):
            print_report(grid.build_report_model(), staff_name=user.display_name,
                         staff_email=user.email, surface=StreamlitPrintSurface())
            st.caption("No print dialog? Use “Download report (HTML)” below and print that file.")


def _table(grid: AssessmentGrid):
    df = table_frame(grid)
    cfg = {"SL": st.column_config.NumberColumn("SL", disabled=True, width="small")}
    for f in FIELDS:
        cfg[f] = st.column_config.TextColumn(HEADINGS[f], help=_PLACEHOLDERS[f])
    cfg["target_values"] = st.column_config.TextColumn(
        HEADINGS["target_values"], help="Target (locked once a rating is chosen)")
    edited = st.data_editor(
        df,
        column_config=cfg,
        use_container_width=True,
        hide_index=True,
        num_rows="fixed",
        key=f"pa_editor_{st.session_state.get(EDITOR_REV_KEY, 0)}",
    )
    written = apply_table_edits(grid, edited)
    if written or not table_in_sync(grid, edited):
        _reset_editor()
        st.rerun()


def _rating_options(grid: AssessmentGrid):
    st.markdown("#### Rating Options")
    st.caption("A chosen rating replaces the row's target value.")
    tags = list(RATING_BUCKETS)
    head = st.columns([0.5] + [1] * len(tags) + [1.2])
    head[0].markdown("**SL**")
    for i, tag in enumerate(tags, start=1):
        head[i].markdown(f"**{RATING_BUCKETS[tag][0]}**")
    head[-1].markdown("**Selected**")

    for row in grid.visible_rows():
        cols = st.columns([0.5] + [1] * len(tags) + [1.2])
        cols[0].write(row.sl)
        for i, tag in enumerate(tags, start=1):
            label, options = RATING_BUCKETS[tag]
            key = dropdown_key(tag, row.id)
            with cols[i]:
                arrow = "▴" if grid.is_dropdown_open(key) else "▾"
                if st.button(f"{label} {arrow}", key=f"btn_{key}"):
                    grid.toggle_dropdown(key)
                    st.rerun()
                if grid.is_dropdown_open(key):
                    for opt in options:
                        if st.button(opt, key=f"opt_{key}_{opt}", type="secondary"):
                            grid.select_rating(row.id, opt, key)
                            _reset_editor()
                            st.rerun()
        cols[-1].write(grid.selected_values.get(row.id, "—"))


def _summary(grid: AssessmentGrid):
    s = summarize(grid)
    c = st.columns(4)
    c[0].metric("Total Activities", s["total_activities"]); c[0].caption("Assessment activities")
    c[1].metric("Targets Met", s["targets_met"]); c[1].caption("Activities meeting targets")
    c[2].metric("Below Target", s["below_target"]); c[2].caption("Activities below target")
    c[3].metric("Average Score", f"{s['average_score']:.1f}"); c[3].caption("Overall performance score")


def _exports(grid: AssessmentGrid, user: AuthUser):
    model = grid.build_report_model()
    stamp = datetime.now()
    c1, c2 = st.columns(2)
    with c1:
        st.download_button(
            "Download report (HTML)",
            data=render_report_html(model, staff_name=user.display_name, staff_email=user.email,
                                    printed_at=stamp).encode("utf-8"),
            file_name=f"performance_assessment_{stamp:%Y%m%d}.html",
            mime="text/html",
            use_container_width=True,
        )
    with c2:
        st.download_button(
            "Export assessment (CSV)",
            data=df_to_csv_bytes(report_frame(model)),
            file_name=f"performance_assessment_{stamp:%Y%m%d}.csv",
            mime="text/csv",
            use_container_width=True,
        )

    keys = SnapshotStore().keys_for_user(user.id)
    with st.expander(f"Saved assessments ({len(keys)})"):
        if not keys:
            st.caption("Nothing saved yet.")
        for k in keys:
            st.code(k, language=None)


def render(user: AuthUser):
    if user is None:
        st.warning("Please sign in to continue."); st.stop()

    render_theme_css()
    render_header("Performance Assessment", "Manage and review staff performance assessments", user)

    grid = _grid()
    _toolbar(grid, user)

    with st.container(border=True):
        st.subheader("Performance Assessment Details")
        st.caption("Detailed performance assessment with targets and achievements")
        _table(grid)
        if grid.can_add_row:
            if st.button(f"+ Add Row ({grid.visible_row_count}/{MAX_ROWS})"):
                grid.add_row()
                _reset_editor()
                st.rerun()
        _rating_options(grid)

    _summary(grid)
    _exports(grid, user)

    render_footer()
