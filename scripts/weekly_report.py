"""Print drift, trend and weekly stats for an exported CSV/JSON habit log."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from habit_engine.adapters import csv_adapter, json_adapter
from habit_engine.clock import Clock, FixedClock
from habit_engine.config import load_settings
from habit_engine.drift import detect_drift
from habit_engine.trend import compute_trend
from habit_engine.weekly import compute_weekly_stats


def _load_readings(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def main() -> None:
    parser = argparse.ArgumentParser(description="Summarize the most recent days of a habit log")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON log file")
    parser.add_argument("--days", type=int, default=7, help="Window size (default: 7)")
    parser.add_argument("--today", help="Pin the current date (YYYY-MM-DD) instead of the wall clock")
    args = parser.parse_args()

    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.today:
        clock = FixedClock(args.today, tz=settings.timezone, week_starts_on=settings.week_starts_on)
    else:
        clock = Clock.from_settings(settings)

    window = _load_readings(Path(args.data))[: args.days]
    drift = detect_drift(window)
    trend = compute_trend(window)
    stats = compute_weekly_stats(window, clock=clock)

    report = {
        "days": len(window),
        "drift": {
            "categories": [{"area": c.area, "severity": c.severity} for c in drift.categories],
            "biggest": drift.biggest,
        },
        "trend": trend.value if trend else None,
        "weekly": stats.as_dict() if stats else None,
    }
    print(json.dumps(report, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
