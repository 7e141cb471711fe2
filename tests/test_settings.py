from core import db
from core.settings import (
    DEFAULT_STAFF_SETTINGS,
    DEFAULT_SYSTEM_SETTINGS,
    get_settings,
    reset_settings,
    save_settings,
)


def test_defaults_when_nothing_saved(temp_db):
    system, staff = get_settings()
    assert system == DEFAULT_SYSTEM_SETTINGS
    assert system["site_name"] == "IWP Management System"
    assert staff == DEFAULT_STAFF_SETTINGS


def test_save_and_reload(temp_db):
    ok, msg = save_settings(
        {**DEFAULT_SYSTEM_SETTINGS, "site_name": "GCBS IWP", "maintenance_mode": True, "bogus": 1},
        {"staff_name": "Sonam Wangmo", "college": "College of Business"},
    )
    assert ok, msg
    system, staff = get_settings()
    assert system["site_name"] == "GCBS IWP"
    assert system["maintenance_mode"] is True
    assert "bogus" not in system
    assert staff["staff_name"] == "Sonam Wangmo"
    assert staff["college"] == "College of Business"
    assert staff["division"] == ""


def test_reset_returns_copies_of_defaults(temp_db):
    save_settings({**DEFAULT_SYSTEM_SETTINGS, "site_name": "Changed"}, DEFAULT_STAFF_SETTINGS)
    system, staff = reset_settings()
    assert system == DEFAULT_SYSTEM_SETTINGS
    system["site_name"] = "mutated"
    assert DEFAULT_SYSTEM_SETTINGS["site_name"] == "IWP Management System"
    # reset does not write
    assert get_settings()[0]["site_name"] == "Changed"


def test_unreadable_row_falls_back_to_defaults(temp_db):
    db.exec_sql("INSERT INTO app_settings(name, value) VALUES('system', 'not json')")
    assert get_settings()[0] == DEFAULT_SYSTEM_SETTINGS
