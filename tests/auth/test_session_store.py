from __future__ import annotations

from flask import Flask

from school_portal.auth.model import SessionUser
from school_portal.auth.store import FlaskSessionStore, MappingSessionStore


def _user() -> SessionUser:
    return SessionUser.from_api(
        {
            "id": "t-1",
            "name": "Tara",
            "role": "Teacher",
            "branchId": "br-1",
            "email": "tara@school.test",
            "leaveBalances": {"sick": 4},
        }
    )


def test_mapping_store_round_trips_token_and_user():
    backing = {}
    store = MappingSessionStore(backing)

    store.set_token("tok")
    store.set_user(_user())

    assert store.get_token() == "tok"
    assert store.get_user() == _user()
    assert backing["session_user"]["leaveBalances"] == {"sick": 4}


def test_clear_removes_only_session_keys():
    backing = {"other": 1}
    store = MappingSessionStore(backing)
    store.set_token("tok")
    store.set_user(_user())

    store.clear()

    assert store.get_token() is None
    assert store.get_user() is None
    assert backing == {"other": 1}


def test_setting_empty_token_removes_it():
    store = MappingSessionStore()
    store.set_token("tok")

    store.set_token(None)

    assert store.get_token() is None


def test_merged_applies_profile_fields_and_keeps_branch_details():
    user = SessionUser.from_api({**_user().to_api(), "schoolName": "North High", "enabledFeatures": {"library": True}})

    merged = user.merged({"name": "Tara K", "phone": "555"})

    assert merged.name == "Tara K"
    assert merged.phone == "555"
    assert merged.school_name == "North High"
    assert merged.enabled_features == {"library": True}
    assert merged.extra["leaveBalances"] == {"sick": 4}


def test_flask_store_uses_request_session():
    app = Flask(__name__)
    app.secret_key = "test"
    store = FlaskSessionStore()

    with app.test_request_context("/"):
        store.set_token("tok")
        store.set_user(_user())
        assert store.get_user().user_id == "t-1"

    with app.test_request_context("/"):
        assert store.get_token() is None
