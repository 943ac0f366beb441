"""Deployment configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

load_dotenv()

# Reference time zone for "today", "yesterday" and week boundaries
TIMEZONE: str = os.getenv("HABIT_TIMEZONE", "Pacific/Honolulu")

# First day of the week: "sunday" or "monday"
WEEK_START: str = os.getenv("HABIT_WEEK_START", "sunday")

# Scoring generation used for new readings
SCORING_STRATEGY: str = os.getenv("HABIT_SCORING_STRATEGY", "daily-v1")

# Names registered in habit_engine.scoring.STRATEGIES
SCORING_STRATEGIES = ("daily-v1", "checkin-v2")

LOG_LEVEL: str = os.getenv("HABIT_LOG_LEVEL", "WARNING")

_WEEKDAYS = {"monday": 0, "sunday": 6}


@dataclass(frozen=True)
class Settings:
    timezone: str
    week_starts_on: int
    scoring_strategy: str
    log_level: str


def load_settings() -> Settings:
    """Validate the module-level values and return them as a ``Settings``."""

    try:
        ZoneInfo(TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown time zone '{TIMEZONE}'") from exc

    week_start = WEEK_START.strip().lower()
    if week_start not in _WEEKDAYS:
        raise ValueError(f"HABIT_WEEK_START must be 'sunday' or 'monday', got '{WEEK_START}'")

    strategy = SCORING_STRATEGY.strip()
    if strategy not in SCORING_STRATEGIES:
        raise ValueError(f"Unknown scoring strategy '{SCORING_STRATEGY}'. Expected one of {sorted(SCORING_STRATEGIES)}")

    return Settings(
        timezone=TIMEZONE,
        week_starts_on=_WEEKDAYS[week_start],
        scoring_strategy=strategy,
        log_level=LOG_LEVEL.strip().upper(),
    )
