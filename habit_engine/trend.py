"""Recent vs older score comparison."""

from __future__ import annotations

from typing import Optional

import numpy as np

from habit_engine.schema import ReadingWindow, Trend

MIN_READINGS = 5
RECENT_SIZE = 3
MARGIN = 0.3


def compute_trend(window: ReadingWindow) -> Optional[Trend]:
    """Compare the three most recent total scores with the rest of the window.

    Returns ``None`` when fewer than five readings are available.
    """

    if len(window) < MIN_READINGS:
        return None

    scores = np.asarray([reading.total_score for reading in window], dtype=float)
    recent_avg = float(scores[:RECENT_SIZE].mean())
    older_avg = float(scores[RECENT_SIZE:].mean())

    if recent_avg > older_avg + MARGIN:
        return Trend.UP
    if recent_avg < older_avg - MARGIN:
        return Trend.DOWN
    return Trend.FLAT
