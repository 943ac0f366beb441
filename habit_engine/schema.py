"""Core data schema for daily habit readings and their analyses."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional, Sequence


FLAG_FIELDS = ("bed_on_time", "workout", "eat_windows", "block1", "block2", "anchor")


@dataclass(frozen=True)
class HabitScores:
    """Sub-scores and total for one day."""

    energy_score: int
    exec_score: int
    life_score: int
    total_score: int

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DailyHabitReading:
    """One calendar day's validated report plus its derived scores."""

    date: str
    sleep_hours: float
    bed_on_time: bool
    workout: bool
    eat_windows: bool
    block1: bool
    block2: bool
    anchor: bool
    energy_score: int
    exec_score: int
    life_score: int
    total_score: int
    notes: str = ""

    @property
    def flags(self) -> tuple[bool, ...]:
        return tuple(getattr(self, name) for name in FLAG_FIELDS)

    @property
    def scores(self) -> HabitScores:
        return HabitScores(self.energy_score, self.exec_score, self.life_score, self.total_score)

    def as_dict(self) -> dict:
        return asdict(self)


# Most recent reading first.
ReadingWindow = Sequence[DailyHabitReading]


@dataclass(frozen=True)
class ParseResult:
    ok: bool
    data: Optional[DailyHabitReading] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, reading: DailyHabitReading) -> "ParseResult":
        return cls(ok=True, data=reading)

    @classmethod
    def failure(cls, message: str) -> "ParseResult":
        return cls(ok=False, error=message)


@dataclass(frozen=True)
class DriftCategory:
    area: str
    severity: int


@dataclass(frozen=True)
class DriftReport:
    """Triggered categories, most severe first, and the single biggest area."""

    categories: tuple[DriftCategory, ...]
    biggest: str

    @property
    def areas(self) -> list[str]:
        return [category.area for category in self.categories]


class Trend(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    FLAT = "FLAT"

    @property
    def label(self) -> str:
        arrows = {"UP": "↑", "DOWN": "↓", "FLAT": "→"}
        return f"{arrows[self.value]} {self.value}"


@dataclass(frozen=True)
class WeeklyStats:
    week_start: str
    avg_score: float
    best_day: str
    best_score: int
    worst_day: str
    worst_score: int
    biggest_drift_area: str
    suggested_fix: str

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CheckinReading:
    """Eight-habit check-in record from the conversational flow.

    Habit values are ``True``/``False`` or ``None`` when the dialogue could not
    establish them.
    """

    date: str
    no_escape_media: Optional[bool] = None
    fixed_eating: Optional[bool] = None
    clean_evening: Optional[bool] = None
    work_win: Optional[bool] = None
    personal_win: Optional[bool] = None
    gym: Optional[bool] = None
    kids_quality: Optional[bool] = None
    bed_on_time: Optional[bool] = None
    mood: Optional[int] = None
    stress_note: str = ""
