import pandas as pd
import pytest

from core.assessment import (
    FIELDS,
    INITIAL_VISIBLE_ROWS,
    MAX_ROWS,
    AssessmentGrid,
    apply_table_edits,
    summarize,
    table_frame,
    table_in_sync,
)


def test_seeded_rows(grid):
    assert len(grid.rows) == MAX_ROWS
    assert grid.visible_row_count == INITIAL_VISIBLE_ROWS
    assert [r.id for r in grid.rows[:3]] == ["1", "2", "3"]
    assert grid.get_effective_value("1", "college_section") == "Academics with Masters currently on campus"
    assert grid.get_effective_value("12", "activities").startswith("AD focal person")
    assert grid.get_effective_value("13", "college_section") == "College Activities"
    assert grid.get_effective_value("13", "activities") == ""


def test_override_takes_precedence(grid):
    grid.set_field_value("1", "college_section", "Override")
    assert grid.get_effective_value("1", "college_section") == "Override"


def test_unseeded_row_is_empty(grid):
    assert grid.get_effective_value("14", "unit") == ""
    for f in FIELDS:
        assert grid.get_effective_value("20", f) == ""


def test_empty_overlay_falls_back_to_default(grid):
    grid.set_field_value("2", "activities", "")
    assert grid.get_effective_value("2", "activities") == "Record of PhD faculty"


def test_set_field_value_is_idempotent(grid):
    grid.set_field_value("5", "unit", "%")
    once = grid.get_effective_value("5", "unit")
    grid.set_field_value("5", "unit", "%")
    assert grid.get_effective_value("5", "unit") == once == "%"


def test_set_field_value_replaces_overlay_mapping(grid):
    grid.set_field_value("3", "unit", "Number")
    before = grid.input_values
    grid.set_field_value("3", "final_score", "90")
    assert grid.input_values is not before
    assert before == {"3": {"unit": "Number"}}
    assert grid.input_values["3"] == {"unit": "Number", "final_score": "90"}


def test_unknown_field_and_row(grid):
    with pytest.raises(ValueError):
        grid.set_field_value("1", "nope", "x")
    with pytest.raises(KeyError):
        grid.get_effective_value("21", "unit")


def test_rating_selection_overwrites_across_buckets(grid):
    grid.select_rating("4", "100-95", "ot-4")
    grid.select_rating("4", "84.99-80", "ni-4")
    assert grid.selected_values == {"4": "84.99-80"}


def test_select_rating_closes_invoking_dropdown(grid):
    grid.toggle_dropdown("vg-2")
    grid.toggle_dropdown("ot-2")
    grid.select_rating("2", "94.99-90", "vg-2")
    assert not grid.is_dropdown_open("vg-2")
    assert grid.is_dropdown_open("ot-2")


def test_dropdowns_are_independent(grid):
    grid.toggle_dropdown("ot-3")
    grid.toggle_dropdown("vg-3")
    assert grid.is_dropdown_open("ot-3")
    assert grid.is_dropdown_open("vg-3")
    grid.toggle_dropdown("ot-3")
    assert not grid.is_dropdown_open("ot-3")
    assert grid.is_dropdown_open("vg-3")


def test_add_row_caps_at_twenty(grid):
    for _ in range(7):
        grid.add_row()
    assert grid.visible_row_count == 20
    assert not grid.can_add_row
    grid.add_row()
    assert grid.visible_row_count == 20
    assert len(grid.visible_rows()) == 20


def test_rating_wins_over_target_value(grid):
    grid.set_field_value("1", "target_values", "80")
    assert grid.display_target("1") == "80"
    grid.select_rating("1", "100-85", "ot-1")
    assert grid.display_target("1") == "100-85"
    # the typed value is kept underneath
    assert grid.get_effective_value("1", "target_values") == "80"


def test_report_model_covers_all_rows(grid):
    grid.set_field_value("15", "staff_feedback", "Good progress")
    grid.select_rating("15", "89.99-85", "good-15")
    model = grid.build_report_model()
    assert len(model.rows) == MAX_ROWS
    row = model.rows[14]
    assert row.id == "15" and row.sl == 15
    assert row.staff_feedback == "Good progress"
    assert row.target_values == "89.99-85"
    assert row.rating_selection == "89.99-85"
    assert model.rows[0].rating_selection is None


def test_report_model_is_stable(grid):
    grid.set_field_value("1", "unit", "Number")
    assert grid.build_report_model() == grid.build_report_model()


def test_apply_table_edits_writes_only_changed_cells(grid):
    df = table_frame(grid)
    assert list(df.index[:2]) == ["1", "2"]
    assert len(df) == INITIAL_VISIBLE_ROWS
    edited = df.copy()
    edited.at["2", "unit"] = "Number"
    edited.at["3", "final_score"] = "88"
    assert apply_table_edits(grid, edited) == 2
    assert grid.get_effective_value("2", "unit") == "Number"
    assert grid.get_effective_value("3", "final_score") == "88"
    assert set(grid.input_values) == {"2", "3"}


def test_apply_table_edits_treats_missing_as_empty(grid):
    edited = table_frame(grid)
    edited.at["4", "unit"] = None
    assert apply_table_edits(grid, edited) == 0
    assert apply_table_edits(grid, pd.DataFrame()) == 0


def test_apply_table_edits_twice_writes_once(grid):
    edited = table_frame(grid)
    edited.at["2", "unit"] = "Number"
    assert apply_table_edits(grid, edited) == 1
    assert apply_table_edits(grid, edited) == 0
    assert grid.input_values == {"2": {"unit": "Number"}}
    assert table_in_sync(grid, edited)


def test_rated_row_target_is_read_only(grid):
    grid.select_rating("1", "100-95", "ot-1")
    edited = table_frame(grid)
    edited.at["1", "target_values"] = "60"
    assert apply_table_edits(grid, edited) == 0
    assert grid.display_target("1") == "100-95"
    assert grid.build_report_model().rows[0].target_values == "100-95"
    assert not table_in_sync(grid, edited)
    assert table_in_sync(grid, table_frame(grid))


def test_clearing_seeded_cell_shows_default_and_settles(grid):
    edited = table_frame(grid)
    edited.at["1", "college_section"] = ""
    assert apply_table_edits(grid, edited) == 1
    assert apply_table_edits(grid, edited) == 0
    assert table_frame(grid).at["1", "college_section"] == "Academics with Masters currently on campus"
    assert not table_in_sync(grid, edited)


def test_summarize(grid):
    grid.set_field_value("1", "target_values", "90")
    grid.set_field_value("1", "target_achieved", "95")
    grid.select_rating("2", "100-95", "ot-2")
    grid.set_field_value("2", "target_achieved", "80")
    grid.set_field_value("3", "target_achieved", "not a number")
    grid.set_field_value("1", "final_score", "90")
    grid.set_field_value("2", "final_score", "85")
    s = summarize(grid)
    assert s == {"total_activities": 13, "targets_met": 1, "below_target": 1, "average_score": 87.5}


def test_summarize_empty_grid():
    assert summarize(AssessmentGrid())["average_score"] == 0.0

