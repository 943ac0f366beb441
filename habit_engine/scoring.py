"""Composite daily scoring and the versioned scoring strategies."""

from __future__ import annotations

import math
from dataclasses import asdict, replace
from typing import Any, Mapping, Optional, Protocol, Sequence

from habit_engine.config import load_settings
from habit_engine.schema import FLAG_FIELDS, CheckinReading, DailyHabitReading, HabitScores

SLEEP_TARGET_HOURS = 7.5


def round_tenth(value: float) -> float:
    """Round to one decimal, halves away from zero for non-negative values."""

    return math.floor(value * 10 + 0.5) / 10


def compute_scores(sleep_hours: float, flags: Sequence[bool]) -> HabitScores:
    """Score one day from sleep hours and the six ordered habit flags.

    Flags are bed on time, workout, eating windows, block 1, block 2, anchor.
    """

    if len(flags) != len(FLAG_FIELDS):
        raise ValueError(f"Expected {len(FLAG_FIELDS)} habit flags, got {len(flags)}")

    bed, workout, eat, block1, block2, anchor = (int(bool(flag)) for flag in flags)
    energy = (1 if sleep_hours >= SLEEP_TARGET_HOURS else 0) + bed + workout + eat
    execution = block1 + block2
    life = anchor
    return HabitScores(
        energy_score=energy,
        exec_score=execution,
        life_score=life,
        total_score=energy + execution + life,
    )


def score_reading(reading: DailyHabitReading) -> DailyHabitReading:
    """Return the reading with scores derived from its own inputs."""

    scores = compute_scores(reading.sleep_hours, reading.flags)
    if scores == reading.scores:
        return reading
    return replace(reading, **scores.as_dict())


class ScoringStrategy(Protocol):
    name: str
    max_score: int

    def score(self, values: Mapping[str, Any]) -> HabitScores:
        ...


class DailyBooleanStrategy:
    """Canonical model: sleep threshold plus six yes/no habits, 0-7."""

    name = "daily-v1"
    max_score = 7

    def score(self, values: Mapping[str, Any]) -> HabitScores:
        return compute_scores(float(values["sleep_hours"]), [bool(values[name]) for name in FLAG_FIELDS])


STRESS_ESCAPES = ("no_escape_media", "fixed_eating", "clean_evening")
CHECKIN_HABITS = STRESS_ESCAPES + ("work_win", "personal_win", "gym", "kids_quality", "bed_on_time")


def _habit_value(values: Mapping[str, Any], name: str) -> Optional[bool]:
    raw = values.get(name)
    if raw is None:
        return None
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    raise ValueError(f"Habit '{name}' must be 1, 0 or null, got {raw!r}")


class CheckinHabitStrategy:
    """Eight-habit check-in model, 0-8; unknown habits score nothing."""

    name = "checkin-v2"
    max_score = 8

    def habits(self, values: Mapping[str, Any]) -> dict[str, Optional[bool]]:
        habits = {name: _habit_value(values, name) for name in CHECKIN_HABITS}
        mood = values.get("mood")
        if mood is not None and (isinstance(mood, bool) or not isinstance(mood, int) or not 1 <= mood <= 5):
            raise ValueError(f"Mood must be an integer from 1 to 5, got {mood!r}")
        return habits

    def score(self, values: Mapping[str, Any]) -> HabitScores:
        done = {name: int(bool(value)) for name, value in self.habits(values).items()}
        energy = (
            done["no_escape_media"] + done["fixed_eating"] + done["clean_evening"] + done["gym"] + done["bed_on_time"]
        )
        execution = done["work_win"] + done["personal_win"]
        life = done["kids_quality"]
        return HabitScores(
            energy_score=energy,
            exec_score=execution,
            life_score=life,
            total_score=energy + execution + life,
        )

    def score_checkin(self, reading: CheckinReading) -> HabitScores:
        return self.score(asdict(reading))

    def stress_cluster(self, values: Mapping[str, Any]) -> bool:
        """True when at least two stress-escape habits were explicitly missed."""

        habits = self.habits(values)
        return sum(1 for name in STRESS_ESCAPES if habits[name] is False) >= 2


STRATEGIES: dict[str, type] = {
    DailyBooleanStrategy.name: DailyBooleanStrategy,
    CheckinHabitStrategy.name: CheckinHabitStrategy,
}


def get_strategy(name: Optional[str] = None) -> ScoringStrategy:
    """Resolve a scoring strategy by name, defaulting to the configured one."""

    if name is None:
        name = load_settings().scoring_strategy

    try:
        return STRATEGIES[name]()
    except KeyError as exc:
        raise ValueError(f"Unknown scoring strategy '{name}'. Expected one of {sorted(STRATEGIES)}") from exc
