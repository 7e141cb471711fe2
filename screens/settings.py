# screens/settings.py
from __future__ import annotations
import logging
import streamlit as st

from core.auth import AuthUser
from core.branding import render_header, render_footer
from core.config import APP_VERSION
from core.settings import (
    APPRAISAL_PERIODS,
    COLLEGES,
    DIVISIONS,
    POSITION_LEVELS,
    get_settings,
    reset_settings,
    save_settings,
)
from core.theme import render_theme_css

logger = logging.getLogger(__name__)


def _pick(label: str, options: list[str], current: str, key: str, placeholder: str) -> str:
    opts = [""] + options
    idx = opts.index(current) if current in opts else 0
    return st.selectbox(label, opts, index=idx, key=key,
                        format_func=lambda o: placeholder if o == "" else o)


def render(user: AuthUser):
    if user is None:
        st.warning("Please sign in to continue."); st.stop()

    render_theme_css()
    render_header("Settings", "Configure system settings and preferences", user)

    if st.session_state.pop("_settings_reset", False):
        for k in [k for k in st.session_state if str(k).startswith("set_")]:
            del st.session_state[k]
        system, staff = reset_settings()
        st.info("Defaults restored. Save to keep them.")
    else:
        system, staff = get_settings()

    left, right = st.columns(2)
    with left:
        with st.container(border=True):
            st.subheader("General Settings")
            st.caption("Basic system configuration")
            site_name = st.text_input("Site Name", value=system["site_name"], key="set_site_name")
            review_deadline = st.text_input("Review Deadline (days)", value=system["review_deadline"],
                                            key="set_review_deadline")
            max_file_size = st.text_input("Max File Size (MB)", value=system["max_file_size"],
                                          key="set_max_file_size")
        with st.container(border=True):
            st.subheader("Notifications")
            st.caption("Email and notification preferences")
            email_notifications = st.toggle("Email Notifications", value=system["email_notifications"],
                                            help="Send email notifications for key events",
                                            key="set_email_notifications")
    with right:
        with st.container(border=True):
            st.subheader("Security")
            st.caption("Access control and security preferences")
            user_registration = st.toggle("User Registration", value=system["user_registration"],
                                          help="Allow new users to register", key="set_user_registration")
            maintenance_mode = st.toggle("Maintenance Mode", value=system["maintenance_mode"],
                                         help="Temporarily disable the system", key="set_maintenance_mode")
        with st.container(border=True):
            st.subheader("Backup & Maintenance")
            st.caption("Database and system maintenance")
            auto_backup = st.toggle("Automatic Backup", value=system["auto_backup"],
                                    help="Enable daily automatic backups", key="set_auto_backup")

    with st.container(border=True):
        st.subheader("Staff Information")
        st.caption("Configure staff information and appraisal settings")
        s1, s2 = st.columns(2)
        with s1:
            staff_name = st.text_input("Staff Name", value=staff["staff_name"], key="set_staff_name")
            position_level = _pick("Position Level", POSITION_LEVELS, staff["position_level"],
                                   "set_position_level", "Select position level")
            position_title = st.text_input("Position Title", value=staff["position_title"],
                                           key="set_position_title")
            division = _pick("Division", DIVISIONS, staff["division"], "set_division", "Select division")
        with s2:
            staff_id_no = st.text_input("Staff ID No", value=staff["staff_id_no"], key="set_staff_id_no")
            appraisal_period = _pick("Appraisal Period", APPRAISAL_PERIODS, staff["appraisal_period"],
                                     "set_appraisal_period", "Select appraisal period")
            college = _pick("College", COLLEGES, staff["college"], "set_college", "Select college")

    b1, b2, _ = st.columns([1, 1, 4])
    with b1:
        if st.button("Save Changes", type="primary", use_container_width=True):
            ok, msg = save_settings(
                {
                    "site_name": site_name,
                    "email_notifications": email_notifications,
                    "auto_backup": auto_backup,
                    "maintenance_mode": maintenance_mode,
                    "user_registration": user_registration,
                    "review_deadline": review_deadline,
                    "max_file_size": max_file_size,
                },
                {
                    "staff_name": staff_name,
                    "staff_id_no": staff_id_no,
                    "position_level": position_level,
                    "appraisal_period": appraisal_period,
                    "position_title": position_title,
                    "college": college,
                    "division": division,
                },
            )
            if ok:
                logger.info("Settings updated by %s", user.email)
                st.success(msg)
            else:
                st.error(msg)
    with b2:
        if st.button("Reset to Defaults", use_container_width=True):
            st.session_state["_settings_reset"] = True
            st.rerun()

    with st.container(border=True):
        st.subheader("System Status")
        st.caption("Current system information and status")
        c = st.columns(3)
        c[0].metric("System Status", "Online")
        c[1].metric("Version", APP_VERSION)
        c[2].metric("Maintenance", "On" if maintenance_mode else "Off")

    render_footer()
