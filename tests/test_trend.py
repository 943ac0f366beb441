from datetime import date, timedelta

import pytest

from habit_engine.schema import DailyHabitReading, Trend
from habit_engine.scoring import compute_scores
from habit_engine.trend import compute_trend


def window_of(totals):
    """Readings scoring the given totals, most recent first."""

    readings = []
    for i, total in enumerate(totals):
        hits = max(total - 1, 0)
        flags = [True] * hits + [False] * (6 - hits)
        sleep = 8.0 if total else 6.0
        day = (date(2025, 3, 9) - timedelta(days=i)).isoformat()
        scores = compute_scores(sleep, flags)
        readings.append(DailyHabitReading(day, sleep, *flags, **scores.as_dict()))
    return readings


@pytest.mark.parametrize("size", [0, 1, 4])
def test_insufficient_data(size):
    assert compute_trend(window_of([5] * size)) is None


def test_flat_with_same_scores():
    assert compute_trend(window_of([5] * 7)) is Trend.FLAT


def test_flat_with_five_readings():
    assert compute_trend(window_of([4, 4, 4, 4, 4])) is Trend.FLAT


def test_up_when_recent_scores_higher():
    assert compute_trend(window_of([7, 7, 6, 3, 3, 3, 3])) is Trend.UP


def test_down_when_recent_scores_lower():
    assert compute_trend(window_of([2, 2, 2, 6, 6, 6, 6])) is Trend.DOWN


def test_small_differences_stay_flat():
    assert compute_trend(window_of([5, 5, 5, 5, 5, 5, 4])) is Trend.FLAT


def test_older_part_uses_whole_remainder():
    # recent 6.0 vs older 5.0 with a long tail
    assert compute_trend(window_of([6, 6, 6] + [5] * 7)) is Trend.UP


def test_labels():
    assert Trend.UP.label == "↑ UP"
    assert Trend.DOWN.label == "↓ DOWN"
    assert Trend.FLAT.label == "→ FLAT"
