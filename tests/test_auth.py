from core import auth, config
from core.auth import AuthUser, user_from_claims


def test_display_name_and_initials():
    u = AuthUser(id="1", email="a@b.c", first_name="Sonam", last_name="Wangmo")
    assert u.display_name == "Sonam Wangmo"
    assert u.initials == "SW"
    anon = AuthUser(id="2", email="x@y.z")
    assert anon.display_name == "User"
    assert anon.initials == "U"
    assert AuthUser(id="3", email="", first_name="Pema").display_name == "Pema"


def test_user_from_oidc_claims():
    u = user_from_claims({
        "is_logged_in": True, "sub": "user_01", "email": "pema@university.edu",
        "given_name": "Pema", "family_name": "Tenzin",
    })
    assert u == AuthUser(id="user_01", email="pema@university.edu", first_name="Pema", last_name="Tenzin")


def test_user_from_claims_not_signed_in():
    assert user_from_claims(None) is None
    assert user_from_claims({}) is None
    assert user_from_claims({"is_logged_in": False}) is None
    assert user_from_claims({"is_logged_in": True}) is None


def test_user_from_claims_falls_back_to_email_for_id():
    u = user_from_claims({"email": "namgay@university.edu"})
    assert u.id == "namgay@university.edu"
    assert u.first_name is None


def test_dev_user_override(monkeypatch):
    monkeypatch.setattr(config, "DEV_USER_EMAIL", "dev@university.edu")
    monkeypatch.setattr(config, "DEV_USER_ID", "dev-1")
    monkeypatch.setattr(config, "DEV_USER_FIRST_NAME", "Dev")
    monkeypatch.setattr(config, "DEV_USER_LAST_NAME", "")
    assert auth.current_user() == AuthUser(id="dev-1", email="dev@university.edu", first_name="Dev")


def test_no_dev_user_without_email(monkeypatch):
    monkeypatch.setattr(config, "DEV_USER_EMAIL", "")
    assert auth.dev_user() is None
