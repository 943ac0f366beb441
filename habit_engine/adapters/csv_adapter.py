"""CSV adapter for exported daily log history."""

from __future__ import annotations

import csv

from habit_engine.parser import parse_form
from habit_engine.schema import DailyHabitReading

_REQUIRED_FIELDS = ("date", "sleep_hours", "bed_on_time", "workout", "eat_windows", "block1", "block2", "anchor")


def _parse_row(row: dict, row_number: int) -> DailyHabitReading:
    missing = [field for field in _REQUIRED_FIELDS if not (row.get(field) or "").strip()]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    # Stored score columns are ignored; scores are derived from the inputs.
    result = parse_form({field: row[field].strip() for field in _REQUIRED_FIELDS} | {"notes": row.get("notes")})
    if not result.ok:
        raise ValueError(f"Row {row_number}: {result.error}")
    return result.data


def parse(file_path: str) -> list[DailyHabitReading]:
    """Parse a CSV log into readings, most recent first, one per date."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        by_date: dict[str, DailyHabitReading] = {}
        for row_number, row in enumerate(reader, start=2):
            reading = _parse_row(row, row_number)
            by_date[reading.date] = reading
        return sorted(by_date.values(), key=lambda r: r.date, reverse=True)
