# app.py
from __future__ import annotations
import logging
import streamlit as st
import pandas as pd

from core.auth import AuthUser, current_user, sign_in, sign_out
from core.branding import render_footer
from core.config import APP_NAME, configure_logging
from core.db import ensure_base_schema
from core.settings import get_settings
from core.theme import render_theme_css

# --- Screens (ALL from `screens/`) ---
from screens import (
    dashboard,
    users,
    iwps,
    performance_assessment,
    settings,
)

logger = logging.getLogger("iwp")

st.set_page_config(page_title=APP_NAME, layout="wide")


# --------------- Navigation ----------------
PAGES = {
    "Overview":               lambda u: dashboard.render(u),
    "Users":                  lambda u: users.render(u),
    "IWPs":                   lambda u: iwps.render(u),
    "Performance Assessment": lambda u: performance_assessment.render(u),
    "Settings":               lambda u: settings.render(u),
}


# ----------------- Views -----------------
def _landing_view():
    render_theme_css()
    st.markdown("### Individual Work Plan")
    st.markdown(
        "<h1 style='text-align:center;font-size:3rem'>Organize Your Work,"
        "<span style='color:#a855f7'> Achieve Your Goals</span></h1>",
        unsafe_allow_html=True,
    )
    st.markdown(
        "<p style='text-align:center;color:#6b7280;font-size:1.2rem'>"
        "Create personalized work plans and stay productive with our intuitive "
        "individual work management platform.</p>",
        unsafe_allow_html=True,
    )
    c = st.columns([2, 1, 2])
    with c[1]:
        if st.button("Sign in", use_container_width=True, type="primary"):
            sign_in()
    render_footer()


def _app_view(user: AuthUser):
    # reset header/footer guards so they're rendered once here
    st.session_state.pop("_hdr_done", None)
    st.session_state.pop("_ftr_done", None)

    if not st.session_state.get("_signed_in_logged"):
        logger.info("Session for %s (%s)", user.email, user.id)
        st.session_state["_signed_in_logged"] = True

    system, _ = get_settings()
    with st.sidebar:
        st.markdown(f"### {system['site_name']}")
        st.write(f"**User:** {user.display_name}")
        st.caption(user.email)
        if st.button("Sign out", use_container_width=True):
            st.session_state.clear()
            sign_out()
            st.rerun()

        st.markdown("---")
        st.caption("Navigate")

        pages = list(PAGES)
        # Remember last page to avoid double-click issue
        prev = st.session_state.get("current_page", pages[0])
        if prev not in pages:
            prev = pages[0]

        page_choice = st.radio(
            " ",
            pages,
            index=pages.index(prev),
            label_visibility="collapsed",
            key="__page_select__",
        )
        st.session_state["current_page"] = page_choice

    if system["maintenance_mode"] and page_choice != "Settings":
        st.warning("Maintenance mode is on. Some features may be unavailable.")

    PAGES[page_choice](user)


# ----------------- Main -----------------
def main():
    configure_logging()
    ensure_base_schema()

    user = current_user()
    if user is None:
        _landing_view()
    else:
        _app_view(user)


if __name__ == "__main__":
    pd.options.mode.copy_on_write = True
    main()
