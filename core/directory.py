# core/directory.py
"""Mock directory data (users, IWPs, dashboard) and the listing filters."""
from __future__ import annotations
import pandas as pd

from .utils import contains_ci

# ---------------- Users ----------------
USER_ROLES = ["ADMIN", "SUPERVISOR", "LECTURER"]
_ROLE_LABELS = {"ADMIN": "Admin", "SUPERVISOR": "Supervisor", "LECTURER": "Lecturer"}

_USERS = [
    ("1", "Sonam Wangmo", "sonam.wangmo@university.edu", "LECTURER", "Biology",
     "Science & Technology", "2025-01-05", "active", "2025-01-09"),
    ("2", "Pema Tenzin", "pema.tenzin@university.edu", "SUPERVISOR", "Chemistry",
     "Science & Technology", "2025-01-04", "active", "2025-01-08"),
    ("3", "Sangay Tenzin", "sangay.tenzin@university.edu", "ADMIN", "Administration",
     "Administration", "2024-12-15", "active", "2025-01-10"),
    ("4", "Namgay", "namgay@university.edu", "LECTURER", "Mathematics",
     "Science & Technology", "2024-11-20", "inactive", "2024-12-28"),
]
USER_COLUMNS = ["id", "name", "email", "role", "department", "college", "joined_at", "status", "last_login"]

# ---------------- IWPs ----------------
IWP_STATUSES = ["pending", "in_review", "completed", "rejected"]
_STATUS_LABELS = {
    "pending": "Pending",
    "in_review": "In Review",
    "completed": "Completed",
    "rejected": "Rejected",
    "active": "Active",
    "inactive": "Inactive",
}

_IWPS = [
    ("1", "Dr. John Smith", "john.smith@university.edu", "Computer Science", "Science & Technology",
     "pending", "2025-01-08", "Prof. Sarah Johnson", "sarah.johnson@university.edu", "2025-01-15",
     None, "2024", 1),
    ("2", "Dr. Emily Davis", "emily.davis@university.edu", "Mathematics", "Science & Technology",
     "completed", "2025-01-07", "Dr. Michael Brown", "michael.brown@university.edu", "2025-01-14",
     85, "2024", 2),
    ("3", "Prof. Robert Wilson", "robert.wilson@university.edu", "Physics", "Science & Technology",
     "in_review", "2025-01-06", "Prof. Lisa Anderson", "lisa.anderson@university.edu", "2025-01-13",
     None, "2024", 1),
    ("4", "Dr. Alice Cooper", "alice.cooper@university.edu", "Biology", "Science & Technology",
     "rejected", "2025-01-05", "Prof. Sarah Johnson", "sarah.johnson@university.edu", "2025-01-12",
     None, "2024", 1),
]
IWP_COLUMNS = ["id", "staff_name", "staff_email", "department", "college", "status", "submitted_at",
               "reviewer_name", "reviewer_email", "deadline", "score", "year", "version"]

# ---------------- Dashboard ----------------
DASHBOARD_STATS = [
    # (label, value, caption)
    ("Total Users", 156, "+12% from last month"),
    ("Total IWPs", 89, "+8% from last month"),
    ("Pending Reviews", 23, "-4% from last week"),
    ("Completed Reviews", 66, "+23% from last month"),
]

_RECENT_IWPS = [
    ("1", "Sonam Wangmo", "Computer Science", "pending", "2025-01-08", "Prof. Sarah Johnson"),
    ("2", "Sangay Tenzin", "Mathematics", "completed", "2025-01-07", "Dr. Michael Brown"),
    ("3", "Namgaylhamo", "Physics", "in_review", "2025-01-06", "Prof. Lisa Anderson"),
]
RECENT_COLUMNS = ["id", "staff_name", "department", "status", "submitted_at", "reviewer_name"]

# Profile fields not provided by the identity provider
STAFF_PROFILE = {
    "staff_id": "STF-2024-001",
    "position_level": "Senior Lecturer",
    "appraisal_period": "2024-2025",
    "position_title": "Assistant Professor",
    "college": "College of Computing and Informatics",
    "division": "Computer Science Department",
}


def users_df() -> pd.DataFrame:
    return pd.DataFrame(_USERS, columns=USER_COLUMNS)

def iwps_df() -> pd.DataFrame:
    df = pd.DataFrame(_IWPS, columns=IWP_COLUMNS)
    df["score"] = df["score"].astype("Int64")
    return df

def recent_iwps_df() -> pd.DataFrame:
    return pd.DataFrame(_RECENT_IWPS, columns=RECENT_COLUMNS)


# ---------------- Labels ----------------
def status_label(status: str) -> str:
    return _STATUS_LABELS.get(status, status)

def role_label(role: str) -> str:
    return _ROLE_LABELS.get(role, role)


# ---------------- Filters ----------------
def _matches_any(df: pd.DataFrame, cols: list[str], search: str) -> pd.Series:
    term = (search or "").strip()
    if not term:
        return pd.Series(True, index=df.index)
    mask = pd.Series(False, index=df.index)
    for c in cols:
        mask |= df[c].apply(lambda v: contains_ci(v, term))
    return mask

def filter_users(df: pd.DataFrame, search: str = "", role: str = "all") -> pd.DataFrame:
    """Search over name / email / department; role 'all' or exact role code."""
    mask = _matches_any(df, ["name", "email", "department"], search)
    if role and role != "all":
        mask &= df["role"] == role
    return df[mask]

def filter_iwps(df: pd.DataFrame, search: str = "", status: str = "all",
                department: str = "all") -> pd.DataFrame:
    """Search over staff name / email / department / reviewer; status and department exact or 'all'."""
    mask = _matches_any(df, ["staff_name", "staff_email", "department", "reviewer_name"], search)
    if status and status != "all":
        mask &= df["status"] == status
    if department and department != "all":
        mask &= df["department"] == department
    return df[mask]


# ---------------- Counts ----------------
def user_stats(df: pd.DataFrame) -> dict:
    return {
        "total": len(df),
        "active": int((df["status"] == "active").sum()),
        "lecturers": int((df["role"] == "LECTURER").sum()),
        "supervisors": int((df["role"] == "SUPERVISOR").sum()),
    }

def iwp_departments(df: pd.DataFrame) -> list[str]:
    return list(dict.fromkeys(df["department"].tolist()))

def iwp_status_counts(df: pd.DataFrame) -> dict:
    counts = {"total": len(df)}
    for s in IWP_STATUSES:
        counts[s] = int((df["status"] == s).sum())
    return counts
