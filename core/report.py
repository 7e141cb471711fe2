# core/report.py
"""
Printable performance-assessment report.

render_report_html() is pure: ReportModel + header in, HTML string out.
Printing is the job of a print surface, injected by the
caller (StreamlitPrintSurface in the app, a recorder in tests).
"""
from __future__ import annotations
import html
from datetime import datetime
from typing import Protocol

import pandas as pd

from .assessment import FIELDS, HEADINGS, ReportModel

REPORT_TITLE = "Performance Assessment Report"
REPORT_SUBTITLE = "Individual Work Plan Performance Evaluation"

_CSS = """
body { font-family: Arial, sans-serif; margin: 20px; }
.header { text-align: center; margin-bottom: 30px; }
.header h1 { color: #1f2937; margin-bottom: 5px; }
.header p { color: #6b7280; margin: 0; }
.user-info { margin-bottom: 20px; padding: 15px; background-color: #f9fafb; border-radius: 8px; }
table { width: 100%; border-collapse: collapse; margin: 20px 0; }
th, td { border: 1px solid #d1d5db; padding: 8px; text-align: left; font-size: 12px; }
th { background-color: #f3f4f6; font-weight: bold; }
.print-date { text-align: right; margin-top: 20px; font-size: 12px; color: #6b7280; }
@media print {
  body { margin: 0; }
  .no-print { display: none; }
}
"""


class PrintSurface(Protocol):
    def print_document(self, document: str) -> None: ...


def _e(s) -> str:
    return html.escape(str(s if s is not None else ""))


def render_report_html(model: ReportModel, *, staff_name: str, staff_email: str,
                       printed_at: datetime) -> str:
    head_cells = "".join(f"<th>{_e(h)}</th>" for h in ["SL"] + [HEADINGS[f] for f in FIELDS])
    body_rows = []
    for r in model.rows:
        cells = [f"<td>{r.sl}</td>"] + [f"<td>{_e(getattr(r, f))}</td>" for f in FIELDS]
        body_rows.append("<tr>" + "".join(cells) + "</tr>")

    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{REPORT_TITLE}</title>
<style>{_CSS}</style>
</head>
<body>
<div class="header">
  <h1>{REPORT_TITLE}</h1>
  <p>{REPORT_SUBTITLE}</p>
</div>
<div class="user-info">
  <strong>Staff Member:</strong> {_e(staff_name)}<br>
  <strong>Email:</strong> {_e(staff_email)}<br>
  <strong>Assessment Date:</strong> {printed_at.strftime("%Y-%m-%d")}
</div>
<table>
  <thead><tr>{head_cells}</tr></thead>
  <tbody>
{chr(10).join(body_rows)}
  </tbody>
</table>
<div class="print-date">Report generated on: {printed_at.strftime("%Y-%m-%d %H:%M:%S")}</div>
</body>
</html>
"""


def report_frame(model: ReportModel) -> pd.DataFrame:
    """Same rows as the printed report, for CSV export."""
    cols = ["SL"] + [HEADINGS[f] for f in FIELDS]
    recs = [[r.sl] + [getattr(r, f) for f in FIELDS] for r in model.rows]
    return pd.DataFrame(recs, columns=cols)


def print_report(model: ReportModel, *, staff_name: str, staff_email: str,
                 surface: PrintSurface, printed_at: datetime | None = None) -> str:
    doc = render_report_html(model, staff_name=staff_name, staff_email=staff_email,
                             printed_at=printed_at or datetime.now())
    surface.print_document(doc)
    return doc


_PRINT_ON_LOAD = "<script>window.addEventListener('load', function() { window.print(); });</script>"


def printable_document(document: str) -> str:
    """The report with a script that prints it as soon as it has loaded."""
    if "</body>" in document:
        return document.replace("</body>", _PRINT_ON_LOAD + "\n</body>", 1)
    return document + _PRINT_ON_LOAD


class StreamlitPrintSurface:
    """
    Renders the document inside its own components iframe and prints that frame.

    Nothing is opened in a new window, so popup blockers have nothing to block.
    The browser's print dialog shows only the report.
    """

    def print_document(self, document: str) -> None:
        import streamlit.components.v1 as components

        components.html(printable_document(document), height=0)
