# core/theme.py
from __future__ import annotations
import html
import streamlit as st

# -------------------------
# Palette (light, fixed)
# -------------------------
PALETTE = {
    "primary": "#2563eb",
    "bg": "#f9fafb",
    "text": "#111827",
    "muted": "#6b7280",
    "card_bg": "#ffffff",
    "border": "#e5e7eb",
    "radius": "8px",
    "font": "Inter, system-ui, -apple-system, 'Segoe UI', Roboto, Arial, sans-serif",
}

# badge tone -> (background, text, border)
TONES = {
    "yellow": ("#fefce8", "#ca8a04", "#fde047"),
    "green":  ("#dcfce7", "#166534", "#86efac"),
    "blue":   ("#eff6ff", "#2563eb", "#93c5fd"),
    "red":    ("#fee2e2", "#991b1b", "#fca5a5"),
    "gray":   ("#f3f4f6", "#4b5563", "#d1d5db"),
    "dark":   ("#111827", "#ffffff", "#111827"),
}

STATUS_TONES = {
    "pending": "yellow",
    "completed": "green",
    "in_review": "blue",
    "rejected": "red",
    "active": "green",
    "inactive": "gray",
}


def badge_html(label: str, tone: str = "gray") -> str:
    bg, fg, border = TONES.get(tone, TONES["gray"])
    return (
        f"<span class='iwp-badge' style='background:{bg};color:{fg};border-color:{border}'>"
        f"{html.escape(str(label))}</span>"
    )


# -------------------------------------------------
# Public: inject CSS variables + global styling
# -------------------------------------------------
def render_theme_css():
    p = PALETTE
    st.markdown(
        f"""
<style>
:root {{
  --app-primary: {p["primary"]};
  --app-bg: {p["bg"]};
  --app-text: {p["text"]};
  --app-muted: {p["muted"]};
  --app-card-bg: {p["card_bg"]};
  --app-border: {p["border"]};
  --app-radius: {p["radius"]};
  --app-font: {p["font"]};
}}

html, body, .stApp {{
  background: var(--app-bg) !important;
  color: var(--app-text);
  font-family: var(--app-font);
}}

.block-container {{ padding-top: 1.2rem; }}

/* Header bar used by core.branding.render_header() */
.iwp-topbar {{
  display: flex; justify-content: space-between; align-items: center;
  background: var(--app-card-bg);
  border-bottom: 1px solid var(--app-border);
  padding: 14px 18px;
  border-radius: var(--app-radius);
  margin-bottom: 12px;
}}
.iwp-topbar h1 {{ font-size: 1.8rem; margin: 0; color: var(--app-text); }}
.iwp-topbar p {{ margin: 0; color: var(--app-muted); }}
.iwp-user {{ display: flex; align-items: center; gap: 8px; font-size: .9rem; color: #374151; }}
.iwp-avatar {{
  width: 32px; height: 32px; border-radius: 50%;
  background: var(--app-primary); color: #ffffff;
  display: flex; align-items: center; justify-content: center;
  font-size: .8rem; font-weight: 600;
}}

.iwp-badge {{
  display: inline-block; padding: 1px 8px;
  border: 1px solid; border-radius: 999px;
  font-size: .75rem; font-weight: 600;
}}

.iwp-field-label {{ font-size: .85rem; font-weight: 600; color: var(--app-muted); }}
.iwp-field-value {{
  font-size: .9rem; background: var(--app-bg);
  border: 1px solid var(--app-border); border-radius: 4px;
  padding: 6px 8px; margin-bottom: 8px;
}}

div[data-testid="stMetric"] {{
  background: var(--app-card-bg);
  border: 1px solid var(--app-border);
  border-radius: var(--app-radius);
  padding: 10px 14px;
}}
div[data-testid="stDataFrame"] {{
  background: var(--app-card-bg) !important;
  border: 1px solid var(--app-border);
  border-radius: var(--app-radius);
  padding: 6px;
}}
div[data-testid="stExpander"] {{
  background: var(--app-card-bg) !important;
  border-radius: var(--app-radius) !important;
}}
.stButton > button, .stDownloadButton > button {{
  border-radius: var(--app-radius) !important;
}}
div[data-testid="stAlert"] {{ border-radius: var(--app-radius); }}
</style>
        """,
        unsafe_allow_html=True,
    )
