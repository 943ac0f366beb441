from datetime import date, timedelta

from habit_engine.clock import FixedClock
from habit_engine.drift import detect_drift
from habit_engine.schema import DailyHabitReading
from habit_engine.scoring import compute_scores
from habit_engine.weekly import SUGGESTED_FIXES, compute_weekly_stats, suggested_fix, window_summary

CLOCK = FixedClock("2025-03-12")


def window_of(totals):
    readings = []
    for i, total in enumerate(totals):
        hits = max(total - 1, 0)
        flags = [True] * hits + [False] * (6 - hits)
        sleep = 8.0 if total else 6.0
        day = (date(2025, 3, 9) - timedelta(days=i)).isoformat()
        readings.append(DailyHabitReading(day, sleep, *flags, **compute_scores(sleep, flags).as_dict()))
    return readings


def test_empty_window():
    assert compute_weekly_stats([], clock=CLOCK) is None


def test_weekly_stats():
    window = window_of([5, 7, 3, 7, 3, 6, 4])
    stats = compute_weekly_stats(window, clock=CLOCK)
    assert stats.week_start == "2025-03-09"
    assert stats.avg_score == 5.0
    assert (stats.best_day, stats.best_score) == ("2025-03-08", 7)
    assert (stats.worst_day, stats.worst_score) == ("2025-03-07", 3)
    assert stats.biggest_drift_area == detect_drift(window).biggest
    assert stats.suggested_fix == suggested_fix(stats.biggest_drift_area)


def test_ties_go_to_most_recent_day():
    stats = compute_weekly_stats(window_of([6, 6, 6]), clock=CLOCK)
    assert stats.best_day == "2025-03-09"
    assert stats.worst_day == "2025-03-09"


def test_average_rounds_half_up():
    assert compute_weekly_stats(window_of([5, 5, 6, 5]), clock=CLOCK).avg_score == 5.3


def test_perfect_week_gets_default_fix():
    stats = compute_weekly_stats(window_of([7] * 7), clock=CLOCK)
    assert stats.biggest_drift_area == "None"
    assert stats.suggested_fix == SUGGESTED_FIXES["None"]
    assert stats.avg_score == 7.0


def test_drift_area_drives_fix():
    # totals of 1 leave every habit missed except the sleep point
    stats = compute_weekly_stats(window_of([1] * 7), clock=CLOCK)
    assert stats.biggest_drift_area == "WORK"
    assert stats.suggested_fix == SUGGESTED_FIXES["WORK"]


def test_week_start_follows_clock_convention():
    monday_clock = FixedClock("2025-03-12", week_starts_on=0)
    assert compute_weekly_stats(window_of([4]), clock=monday_clock).week_start == "2025-03-10"


def test_unknown_area_falls_back_to_default():
    assert suggested_fix("HYDRATION") == SUGGESTED_FIXES["None"]


def test_window_summary():
    summary = window_summary(window_of([7, 7, 6, 3, 3, 3, 3]))
    assert summary["days"] == 7
    assert summary["avg_score"] == 4.6
    assert summary["trend"] == "↑ UP"
    assert summary["suggestion"] == suggested_fix(summary["biggest_drift_area"])


def test_window_summary_empty():
    summary = window_summary([])
    assert summary["avg_score"] is None
    assert summary["trend"] is None
    assert summary["drift_areas"] == []
    assert summary["biggest_drift_area"] == "None"


def test_stats_as_dict():
    stats = compute_weekly_stats(window_of([4, 5]), clock=CLOCK)
    assert set(stats.as_dict()) == {
        "week_start", "avg_score", "best_day", "best_score",
        "worst_day", "worst_score", "biggest_drift_area", "suggested_fix",
    }
