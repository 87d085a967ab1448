from __future__ import annotations

import pytest

from school_portal.config import get_settings_module
from school_portal.config.base import parse_weekly_holidays


@pytest.mark.parametrize(
    "env,module",
    [
        ("production", "school_portal.config.production"),
        ("prod", "school_portal.config.production"),
        ("TESTING", "school_portal.config.testing"),
        ("anything", "school_portal.config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module


def test_weekly_holidays_parsing():
    assert parse_weekly_holidays(None) == (5, 6)
    assert parse_weekly_holidays("6, 4,6") == (4, 6)
    assert parse_weekly_holidays("") == ()


def test_weekly_holidays_out_of_range():
    with pytest.raises(ValueError):
        parse_weekly_holidays("7")
