"""Weekly summary statistics."""

from __future__ import annotations

from typing import Optional

import numpy as np

from habit_engine.clock import Clock, default_clock
from habit_engine.drift import NO_DRIFT, detect_drift
from habit_engine.schema import ReadingWindow, WeeklyStats
from habit_engine.scoring import round_tenth
from habit_engine.trend import compute_trend

SUGGESTED_FIXES = {
    "SLEEP": "Set a hard phone-down time 30 min before bed.",
    "FOOD": "Prep meals for your eating windows the night before.",
    "WORK": "Block 90 min tomorrow morning, phone on DND, no Slack.",
    "SOCIAL": "Text one friend today. Schedule one family activity this week.",
    NO_DRIFT: "Keep the consistency. Add one ambitious thing.",
}


def suggested_fix(area: str) -> str:
    return SUGGESTED_FIXES.get(area, SUGGESTED_FIXES[NO_DRIFT])


def _average_score(window: ReadingWindow) -> float:
    return round_tenth(float(np.mean([reading.total_score for reading in window])))


def compute_weekly_stats(window: ReadingWindow, clock: Optional[Clock] = None) -> Optional[WeeklyStats]:
    """Summarize a window (normally the last seven days); ``None`` when empty.

    Ties for best and worst day go to the earliest reading in the window, which
    is the most recent day.
    """

    if not window:
        return None

    best = worst = window[0]
    for reading in window[1:]:
        if reading.total_score > best.total_score:
            best = reading
        if reading.total_score < worst.total_score:
            worst = reading

    biggest = detect_drift(window).biggest
    clock = clock or default_clock()
    return WeeklyStats(
        week_start=clock.week_start(),
        avg_score=_average_score(window),
        best_day=best.date,
        best_score=best.total_score,
        worst_day=worst.date,
        worst_score=worst.total_score,
        biggest_drift_area=biggest,
        suggested_fix=suggested_fix(biggest),
    )


def window_summary(window: ReadingWindow) -> dict:
    """Rolling-window figures used by the morning brief and the dashboard."""

    drift = detect_drift(window)
    trend = compute_trend(window)
    return {
        "days": len(window),
        "avg_score": _average_score(window) if window else None,
        "trend": trend.label if trend else None,
        "drift_areas": drift.areas,
        "biggest_drift_area": drift.biggest,
        "suggestion": suggested_fix(drift.biggest),
    }
