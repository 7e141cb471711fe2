# screens/users.py
from __future__ import annotations
import streamlit as st

from core.auth import AuthUser
from core.branding import render_header, render_footer
from core.directory import USER_ROLES, users_df, filter_users, user_stats, role_label, status_label
from core.theme import render_theme_css
from core.utils import df_to_csv_bytes


def render(user: AuthUser):
    if user is None:
        st.warning("Please sign in to continue."); st.stop()

    render_theme_css()
    render_header("User Management", "Manage system users, roles, and permissions", user)

    df = users_df()
    stats = user_stats(df)
    c = st.columns(4)
    c[0].metric("Total Users", stats["total"]); c[0].caption("All registered users")
    c[1].metric("Active Users", stats["active"]); c[1].caption("Currently active")
    c[2].metric("Lecturers", stats["lecturers"]); c[2].caption("Teaching staff")
    c[3].metric("Supervisors", stats["supervisors"]); c[3].caption("Department heads")

    st.subheader("Search and Filter")
    f1, f2 = st.columns([3, 1])
    with f1:
        search = st.text_input("Search users", placeholder="Search by name, email, or department...",
                               key="users_search", label_visibility="collapsed")
    with f2:
        role_opts = ["all"] + USER_ROLES
        role = st.selectbox("Role", role_opts, key="users_role", label_visibility="collapsed",
                            format_func=lambda r: "All Roles" if r == "all" else role_label(r))

    shown = filter_users(df, search, role)
    st.subheader(f"All Users ({len(shown)})")
    st.caption("Comprehensive user management interface")

    view = shown.assign(
        role=shown["role"].map(role_label),
        status=shown["status"].map(status_label),
    )[["name", "email", "role", "department", "college", "status", "last_login"]]
    st.dataframe(
        view.rename(columns={
            "name": "Name", "email": "Email", "role": "Role", "department": "Department",
            "college": "College", "status": "Status", "last_login": "Last Login",
        }),
        use_container_width=True,
        hide_index=True,
    )

    st.download_button(
        "Export users (CSV)",
        data=df_to_csv_bytes(shown),
        file_name="users.csv",
        mime="text/csv",
    )

    render_footer()
