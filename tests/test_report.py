from datetime import datetime

from core.report import (
    REPORT_TITLE,
    print_report,
    printable_document,
    render_report_html,
    report_frame,
)

STAMP = datetime(2025, 1, 9, 14, 30, 0)


def test_render_contains_header_and_all_rows(grid):
    html = render_report_html(grid.build_report_model(), staff_name="Sonam Wangmo",
                              staff_email="sonam.wangmo@university.edu", printed_at=STAMP)
    assert html.startswith("<!DOCTYPE html>")
    assert REPORT_TITLE in html
    assert "<strong>Staff Member:</strong> Sonam Wangmo" in html
    assert "sonam.wangmo@university.edu" in html
    assert "2025-01-09 14:30:00" in html
    assert html.count("<tr>") == 21  # header + 20 rows
    assert "Academics with Masters currently on campus" in html


def test_render_escapes_cell_text(grid):
    grid.set_field_value("1", "staff_feedback", "<b>great</b> & more")
    html = render_report_html(grid.build_report_model(), staff_name="A", staff_email="a@x",
                              printed_at=STAMP)
    assert "&lt;b&gt;great&lt;/b&gt; &amp; more" in html
    assert "<b>great</b>" not in html


def test_render_shows_rating_in_target_column(grid):
    grid.set_field_value("2", "target_values", "75")
    grid.select_rating("2", "90-99", "vg-2")
    html = render_report_html(grid.build_report_model(), staff_name="A", staff_email="a@x",
                              printed_at=STAMP)
    assert "<td>90-99</td>" in html
    assert "<td>75</td>" not in html


def test_print_hands_document_to_surface_without_mutating(grid, surface):
    grid.set_field_value("1", "unit", "Number")
    grid.toggle_dropdown("ot-1")
    before = (dict(grid.input_values), dict(grid.selected_values), dict(grid.open_dropdowns),
              grid.visible_row_count)
    doc = print_report(grid.build_report_model(), staff_name="A", staff_email="a@x",
                       surface=surface, printed_at=STAMP)
    assert surface.documents == [doc]
    after = (dict(grid.input_values), dict(grid.selected_values), dict(grid.open_dropdowns),
             grid.visible_row_count)
    assert before == after


def test_report_frame_matches_model(grid):
    grid.set_field_value("20", "final_score", "70")
    df = report_frame(grid.build_report_model())
    assert len(df) == 20
    assert list(df.columns[:3]) == ["SL", "College/Section", "Activities"]
    assert df.iloc[19]["Final Score"] == "70"


def test_printable_document_prints_its_own_frame(grid):
    html = render_report_html(grid.build_report_model(), staff_name="A", staff_email="a@x",
                              printed_at=STAMP)
    doc = printable_document(html)
    assert doc.count("window.print()") == 1
    assert "window.open" not in doc
    assert doc.index("window.print()") < doc.index("</body>")
    assert doc.startswith(html[:html.index("</body>")])
    assert doc.rstrip().endswith("</html>")


def test_printable_document_without_body_still_prints():
    doc = printable_document("<p>hi</p>")
    assert doc.startswith("<p>hi</p>")
    assert doc.endswith("</script>")
