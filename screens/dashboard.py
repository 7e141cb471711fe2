# screens/dashboard.py
from __future__ import annotations
import streamlit as st

from core.auth import AuthUser
from core.branding import render_header, render_footer, render_field
from core.directory import DASHBOARD_STATS, STAFF_PROFILE, recent_iwps_df, status_label
from core.theme import render_theme_css, badge_html, STATUS_TONES


def render(user: AuthUser):
    if user is None:
        st.warning("Please sign in to continue."); st.stop()

    render_theme_css()
    render_header("Admin Dashboard", f"Welcome back, {user.display_name}", user)

    # Profile card
    with st.container(border=True):
        st.subheader("User Profile Information")
        st.caption("Details of the currently logged-in user")
        c1, c2 = st.columns(2)
        with c1:
            render_field("Name", user.display_name)
            render_field("Staff ID No", STAFF_PROFILE["staff_id"])
            render_field("Appraisal Period", STAFF_PROFILE["appraisal_period"])
            render_field("College", STAFF_PROFILE["college"])
        with c2:
            render_field("Email", user.email)
            render_field("Position Level", STAFF_PROFILE["position_level"])
            render_field("Position Title", STAFF_PROFILE["position_title"])
            render_field("Division", STAFF_PROFILE["division"])

    # Stats
    cols = st.columns(len(DASHBOARD_STATS))
    for col, (label, value, caption) in zip(cols, DASHBOARD_STATS):
        with col:
            st.metric(label, value)
            st.caption(caption)

    # Recent submissions
    with st.container(border=True):
        st.subheader("Recent IWP Submissions")
        st.caption("Latest individual work plan submissions")
        recent = recent_iwps_df()
        for _, r in recent.iterrows():
            c1, c2 = st.columns([4, 1])
            with c1:
                st.markdown(f"**{r['staff_name']}**  \n{r['department']}")
                st.caption(f"Reviewer: {r['reviewer_name']}")
            with c2:
                st.markdown(badge_html(status_label(r["status"]), STATUS_TONES.get(r["status"], "gray")),
                            unsafe_allow_html=True)
                st.caption(r["submitted_at"])

    render_footer()
