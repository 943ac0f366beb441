"""JSON adapter for exported daily log history."""

from __future__ import annotations

import json

from habit_engine.parser import parse_form
from habit_engine.schema import DailyHabitReading

_REQUIRED_FIELDS = ("date", "sleep_hours", "bed_on_time", "workout", "eat_windows", "block1", "block2", "anchor")


def _parse_item(item: dict, index: int) -> DailyHabitReading:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    missing = [field for field in _REQUIRED_FIELDS if item.get(field) in (None, "")]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    result = parse_form({field: item[field] for field in _REQUIRED_FIELDS} | {"notes": item.get("notes")})
    if not result.ok:
        raise ValueError(f"Item {index}: {result.error}")
    return result.data


def parse(file_path: str) -> list[DailyHabitReading]:
    """Parse a JSON list of log rows into readings, most recent first."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    by_date: dict[str, DailyHabitReading] = {}
    for i, item in enumerate(payload, start=1):
        reading = _parse_item(item, i)
        by_date[reading.date] = reading
    return sorted(by_date.values(), key=lambda r: r.date, reverse=True)
