"""Category-level drift detection across a window of readings."""

from __future__ import annotations

import logging
from collections import Counter

import numpy as np

from habit_engine.schema import DriftCategory, DriftReport, ReadingWindow

logger = logging.getLogger(__name__)

NO_DRIFT = "None"

# Tie-break order when two areas share a severity.
AREA_PRIORITY = {"SLEEP": 0, "FOOD": 1, "WORK": 2, "SOCIAL": 3}

SLEEP_AVG_FLOOR = 7.0
BED_MISS_LIMIT = 2
FOOD_MISS_LIMIT = 2
WORK_MISS_LIMIT = 3
SOCIAL_MISS_LIMIT = 5


def count_misses(window: ReadingWindow) -> Counter:
    """Count missed habits per area; a day missing both work blocks counts twice."""

    misses = Counter(bed=0, food=0, work=0, social=0)
    for reading in window:
        misses["bed"] += 0 if reading.bed_on_time else 1
        misses["food"] += 0 if reading.eat_windows else 1
        misses["work"] += (0 if reading.block1 else 1) + (0 if reading.block2 else 1)
        misses["social"] += 0 if reading.anchor else 1
    return misses


def detect_drift(window: ReadingWindow) -> DriftReport:
    """Rank the habit areas that are failing across the whole window."""

    if not window:
        return DriftReport(categories=(), biggest=NO_DRIFT)

    avg_sleep = float(np.mean([reading.sleep_hours for reading in window]))
    misses = count_misses(window)
    short_sleep = avg_sleep < SLEEP_AVG_FLOOR

    triggered = []
    if short_sleep or misses["bed"] >= BED_MISS_LIMIT:
        triggered.append(DriftCategory("SLEEP", misses["bed"] + (2 if short_sleep else 0)))
    if misses["food"] >= FOOD_MISS_LIMIT:
        triggered.append(DriftCategory("FOOD", misses["food"]))
    if misses["work"] >= WORK_MISS_LIMIT:
        triggered.append(DriftCategory("WORK", misses["work"]))
    if misses["social"] >= SOCIAL_MISS_LIMIT:
        triggered.append(DriftCategory("SOCIAL", misses["social"]))

    ranked = tuple(sorted(triggered, key=lambda item: (-item.severity, AREA_PRIORITY[item.area])))
    if ranked:
        logger.debug("Drift over %d readings: %s", len(window), [(c.area, c.severity) for c in ranked])
    return DriftReport(categories=ranked, biggest=ranked[0].area if ranked else NO_DRIFT)
