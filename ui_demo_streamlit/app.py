"""Streamlit demo UI for habit-engine."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from habit_engine.adapters import csv_adapter, json_adapter
from habit_engine.clock import Clock
from habit_engine.drift import detect_drift
from habit_engine.parser import parse_report
from habit_engine.schema import DailyHabitReading
from habit_engine.trend import compute_trend
from habit_engine.weekly import compute_weekly_stats


def _parse_readings_from_path(file_path: str) -> list[DailyHabitReading]:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> list[DailyHabitReading]:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    try:
        return _parse_readings_from_path(temp_path)
    finally:
        os.unlink(temp_path)


def _yn(value: bool) -> str:
    return "✓" if value else "✗"


def _build_table(readings: list[DailyHabitReading]) -> list[dict[str, Any]]:
    return [
        {
            "date": r.date,
            "sleep": r.sleep_hours,
            "bed": _yn(r.bed_on_time),
            "workout": _yn(r.workout),
            "eat": _yn(r.eat_windows),
            "block 1": _yn(r.block1),
            "block 2": _yn(r.block2),
            "anchor": _yn(r.anchor),
            "score": f"{r.total_score}/7",
            "notes": r.notes,
        }
        for r in readings
    ]


def run_engine(readings: list[DailyHabitReading], days: int = 7, clock: Optional[Clock] = None) -> dict[str, Any]:
    """Run all analysis steps on the most recent ``days`` readings."""

    window = readings[:days]
    drift = detect_drift(window)
    trend = compute_trend(window)
    stats = compute_weekly_stats(window, clock=clock)

    return {
        "table": _build_table(window),
        "drift": [{"area": c.area, "severity": c.severity} for c in drift.categories],
        "biggest_drift_area": drift.biggest,
        "trend": trend.label if trend else None,
        "weekly": stats.as_dict() if stats else None,
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Habit Engine Demo", layout="wide")
    st.title("Habit Engine: Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload habit log", type=["csv", "json"])
        use_demo = st.checkbox("Load demo log", value=True)
        days = st.slider("Window (days)", min_value=1, max_value=30, value=7)
        today_report = st.text_input("Today's report (optional)", value="", placeholder="7.2 Y N Y Y Y N")
        run = st.button("Run engine", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Run engine**.")
        return

    try:
        if use_demo:
            readings = csv_adapter.parse("examples/sample_log.csv")
            data_source = "demo log (examples/sample_log.csv)"
        elif uploaded is not None:
            readings = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.error("Please upload a CSV/JSON file or enable 'Load demo log'.")
            return

        clock = Clock.from_settings()
        if today_report.strip():
            parsed = parse_report(today_report, clock=clock)
            if not parsed.ok:
                st.error(parsed.error)
                return
            readings = [parsed.data] + [r for r in readings if r.date != parsed.data.date]

        if not readings:
            st.error("No readings were found in the selected input.")
            return

        result = run_engine(readings, days=int(days), clock=clock)

        st.success(f"Loaded {len(readings)} readings from {data_source}.")

        st.subheader("A) Daily Log")
        st.table(result["table"])

        st.subheader("B) Trend")
        st.write(result["trend"] or "Not enough data (needs 5 days).")

        st.subheader("C) Drift")
        if result["drift"]:
            st.table(result["drift"])
        else:
            st.write("No drift detected.")

        st.subheader("D) Weekly Review")
        weekly = result["weekly"]
        w1, w2, w3 = st.columns(3)
        w1.metric("Average", f"{weekly['avg_score']}/7")
        w2.metric("Best day", weekly["best_day"], f"{weekly['best_score']}/7")
        w3.metric("Worst day", weekly["worst_day"], f"{weekly['worst_score']}/7")
        st.write(f"**Biggest drift:** {weekly['biggest_drift_area']}")
        st.write(f"**One fix:** {weekly['suggested_fix']}")

    except ValueError as exc:
        st.error(f"Input error: {exc}")
    except Exception:
        st.error("Something went wrong while running the demo. Please verify the input format.")


if __name__ == "__main__":
    main()
