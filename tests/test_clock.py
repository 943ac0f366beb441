from datetime import datetime, timezone

import pytest

from habit_engine import config
from habit_engine.clock import Clock, FixedClock
from habit_engine.config import Settings, load_settings


def test_fixed_clock_dates():
    clock = FixedClock("2025-03-01")
    assert clock.today() == "2025-03-01"
    assert clock.yesterday() == "2025-02-28"
    assert clock.tomorrow() == "2025-03-02"


def test_today_is_computed_in_reference_zone():
    # 05:00 UTC on the 10th is still the evening of the 9th in Honolulu
    clock = Clock("Pacific/Honolulu", now_fn=lambda: datetime(2025, 3, 10, 5, 0, tzinfo=timezone.utc))
    assert clock.today() == "2025-03-09"
    assert Clock("UTC", now_fn=lambda: datetime(2025, 3, 10, 5, 0, tzinfo=timezone.utc)).today() == "2025-03-10"


def test_naive_time_source_rejected():
    clock = Clock("UTC", now_fn=lambda: datetime(2025, 3, 10, 5, 0))
    with pytest.raises(ValueError):
        clock.today()


@pytest.mark.parametrize(
    "day,week_starts_on,expected",
    [
        ("2025-03-09", 6, "2025-03-09"),
        ("2025-03-15", 6, "2025-03-09"),
        ("2025-03-12", 6, "2025-03-09"),
        ("2025-03-09", 0, "2025-03-03"),
        ("2025-03-10", 0, "2025-03-10"),
    ],
)
def test_week_start(day, week_starts_on, expected):
    assert FixedClock(day, week_starts_on=week_starts_on).week_start() == expected


def test_clock_from_settings():
    settings = Settings(timezone="UTC", week_starts_on=0, scoring_strategy="daily-v1", log_level="WARNING")
    clock = Clock.from_settings(settings)
    assert clock.tz.key == "UTC"
    assert clock.week_starts_on == 0


def test_load_settings(monkeypatch):
    monkeypatch.setattr(config, "TIMEZONE", "Europe/Paris")
    monkeypatch.setattr(config, "WEEK_START", "Monday")
    monkeypatch.setattr(config, "LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.timezone == "Europe/Paris"
    assert settings.week_starts_on == 0
    assert settings.log_level == "DEBUG"


def test_load_settings_rejects_unknown_zone(monkeypatch):
    monkeypatch.setattr(config, "TIMEZONE", "Mars/Olympus_Mons")
    with pytest.raises(ValueError, match="Unknown time zone"):
        load_settings()


def test_load_settings_rejects_unknown_week_start(monkeypatch):
    monkeypatch.setattr(config, "WEEK_START", "friday")
    with pytest.raises(ValueError):
        load_settings()


def test_load_settings_rejects_unknown_strategy(monkeypatch):
    monkeypatch.setattr(config, "SCORING_STRATEGY", "points-100")
    with pytest.raises(ValueError, match="Unknown scoring strategy"):
        load_settings()


def test_configured_strategy_names_are_registered():
    from habit_engine.scoring import STRATEGIES

    assert set(config.SCORING_STRATEGIES) == set(STRATEGIES)
