# core/branding.py
from __future__ import annotations
import html
from datetime import date

import streamlit as st

from .auth import AuthUser

FOOTER_OWNER = "Individual Work Plan"


def render_header(title: str, subtitle: str = "", user: AuthUser | None = None):
    """Page header (title, subtitle, avatar + email). Idempotent per run."""
    if st.session_state.get("_hdr_done"):
        return
    right = ""
    if user is not None:
        right = (
            "<div class='iwp-user'>"
            f"<div class='iwp-avatar'>{html.escape(user.initials)}</div>"
            f"<span>{html.escape(user.email)}</span>"
            "</div>"
        )
    sub = f"<p>{html.escape(subtitle)}</p>" if subtitle else ""
    st.markdown(
        f"<div class='iwp-topbar'><div><h1>{html.escape(title)}</h1>{sub}</div>{right}</div>",
        unsafe_allow_html=True,
    )
    st.session_state["_hdr_done"] = True

def render_footer():
    """Bottom footer bar."""
    if st.session_state.get("_ftr_done"):
        return
    st.markdown(
        f"""
        <div style="
            margin-top:24px;
            padding:10px 12px;
            border-top:1px solid rgba(0,0,0,0.06);
            color: var(--app-muted);
            text-align:center;
            font-size:.85rem;">
          &copy; {date.today().year} {FOOTER_OWNER}. All rights reserved.
        </div>
        """,
        unsafe_allow_html=True
    )
    st.session_state["_ftr_done"] = True

def render_field(label: str, value) -> None:
    """Read-only label/value pair, as on the profile card."""
    st.markdown(
        f"<div class='iwp-field-label'>{html.escape(label)}</div>"
        f"<div class='iwp-field-value'>{html.escape(str(value or '—'))}</div>",
        unsafe_allow_html=True,
    )
