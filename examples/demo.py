"""Demo script for habit-engine."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from habit_engine.clock import FixedClock
from habit_engine.drift import detect_drift
from habit_engine.parser import parse_report
from habit_engine.trend import compute_trend
from habit_engine.weekly import compute_weekly_stats

REPORTS = [
    ("2025-03-09", "7.8 Y Y Y Y Y Y solid day"),
    ("2025-03-08", "6.5 N Y Y Y N Y"),
    ("2025-03-07", "6.0 N N Y N N Y late call"),
    ("2025-03-06", "7.0 Y Y N Y Y N"),
    ("2025-03-05", "5.5 N Y N Y N N"),
    ("2025-03-04", "8.2 Y Y Y Y Y Y"),
    ("2025-03-03", "7.5 Y N Y Y N Y"),
]


def main() -> None:
    window = []
    for day, text in REPORTS:
        result = parse_report(text, clock=FixedClock(day))
        if not result.ok:
            print("Rejected:", result.error)
            continue
        window.append(result.data)
        print(f"{day}: {result.data.total_score}/7")

    trend = compute_trend(window)
    print("Drift:", detect_drift(window))
    print("Trend:", trend.label if trend else "not enough data")
    print("Weekly:", compute_weekly_stats(window, clock=FixedClock("2025-03-09")))


if __name__ == "__main__":
    main()
