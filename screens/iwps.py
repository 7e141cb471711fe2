# screens/iwps.py
from __future__ import annotations
import streamlit as st

from core.auth import AuthUser
from core.branding import render_header, render_footer
from core.directory import (
    IWP_STATUSES,
    iwps_df,
    filter_iwps,
    iwp_departments,
    iwp_status_counts,
    status_label,
)
from core.theme import render_theme_css
from core.utils import df_to_csv_bytes


def render(user: AuthUser):
    if user is None:
        st.warning("Please sign in to continue."); st.stop()

    render_theme_css()
    render_header("IWP Management", "Monitor and manage Individual Work Plans", user)

    df = iwps_df()
    counts = iwp_status_counts(df)
    c = st.columns(5)
    c[0].metric("Total IWPs", counts["total"]); c[0].caption("All submissions")
    c[1].metric("Pending", counts["pending"]); c[1].caption("Awaiting review")
    c[2].metric("In Review", counts["in_review"]); c[2].caption("Being reviewed")
    c[3].metric("Completed", counts["completed"]); c[3].caption("Review complete")
    c[4].metric("Rejected", counts["rejected"]); c[4].caption("Needs revision")

    st.subheader("Search and Filter")
    f1, f2, f3 = st.columns([2, 1, 1])
    with f1:
        search = st.text_input("Search IWPs", placeholder="Search by staff name, email, department, or reviewer...",
                               key="iwps_search", label_visibility="collapsed")
    with f2:
        status = st.selectbox("Status", ["all"] + IWP_STATUSES, key="iwps_status", label_visibility="collapsed",
                              format_func=lambda s: "All Status" if s == "all" else status_label(s))
    with f3:
        department = st.selectbox("Department", ["all"] + iwp_departments(df), key="iwps_dept",
                                  label_visibility="collapsed",
                                  format_func=lambda d: "All Departments" if d == "all" else d)

    shown = filter_iwps(df, search, status, department)
    st.subheader(f"Individual Work Plans ({len(shown)})")
    st.caption("Complete overview of all IWP submissions and their status")

    view = shown.assign(
        staff=shown["staff_name"] + " (" + shown["staff_email"] + ")",
        status=shown["status"].map(status_label),
        score=shown["score"].astype("object").where(shown["score"].notna(), "—"),
        version="v" + shown["version"].astype(str),
    )
    st.dataframe(
        view[["staff", "department", "status", "reviewer_name", "submitted_at", "deadline", "score", "version"]]
        .rename(columns={
            "staff": "Staff Member", "department": "Department", "status": "Status",
            "reviewer_name": "Reviewer", "submitted_at": "Submitted", "deadline": "Deadline",
            "score": "Score", "version": "Version",
        }),
        use_container_width=True,
        hide_index=True,
    )

    st.download_button(
        "Export IWPs (CSV)",
        data=df_to_csv_bytes(shown),
        file_name="iwps.csv",
        mime="text/csv",
    )

    render_footer()
