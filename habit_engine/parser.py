"""Daily report parsing for text commands and submitted forms."""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime
from typing import Any, Mapping, Optional

from habit_engine.clock import Clock, default_clock
from habit_engine.schema import FLAG_FIELDS, DailyHabitReading, ParseResult
from habit_engine.scoring import DailyBooleanStrategy, get_strategy

logger = logging.getLogger(__name__)

FIELD_LABELS = ("Bed on time", "Workout", "Eating windows", "Block 1", "Block 2", "Anchor")
EXPECTED_TOKENS = 1 + len(FIELD_LABELS)
MAX_SLEEP_HOURS = 14.0

# Plain ASCII decimals only: "7", "7.5", "8.", ".5"
_DECIMAL = re.compile(r"[0-9]+(\.[0-9]*)?|\.[0-9]+")
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

USAGE = (
    "Format: <SLEEP> <BED Y/N> <WORKOUT Y/N> <EAT Y/N> <BLOCK1 Y/N> <BLOCK2 Y/N> <ANCHOR Y/N>\n"
    "Example: 7.2 Y N Y Y Y N"
)


class _Rejected(Exception):
    pass


def _parse_sleep(raw: Any) -> float:
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        value = float(raw)
    elif isinstance(raw, str) and _DECIMAL.fullmatch(raw.strip()):
        value = float(raw.strip())
    else:
        raise _Rejected(f'Sleep hours must be 0-14. Got: "{raw}"')
    if not math.isfinite(value) or not 0 <= value <= MAX_SLEEP_HOURS:
        raise _Rejected(f'Sleep hours must be 0-14. Got: "{raw}"')
    return value


def _parse_date(raw: Any) -> str:
    text = str(raw).strip()
    message = f'Date must be YYYY-MM-DD. Got: "{raw}"'
    if not _ISO_DATE.fullmatch(text):
        raise _Rejected(message)
    try:
        return datetime.strptime(text, "%Y-%m-%d").date().isoformat()
    except ValueError as exc:
        raise _Rejected(message) from exc


def _parse_flag(raw: Any, label: str) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    token = str(raw).strip().upper()
    if token in ("Y", "1"):
        return True
    if token in ("N", "0"):
        return False
    raise _Rejected(f'"{label}" must be Y or N. Got: "{raw}"')


def _build(day: str, sleep_hours: float, flags: list[bool], notes: str) -> DailyHabitReading:
    strategy = get_strategy()
    if strategy.name != DailyBooleanStrategy.name:
        raise ValueError(
            f"Daily reports are scored with '{DailyBooleanStrategy.name}', "
            f"but the configured scoring strategy is '{strategy.name}'"
        )

    values = dict(zip(FLAG_FIELDS, flags))
    scores = strategy.score({"sleep_hours": sleep_hours, **values})
    return DailyHabitReading(
        date=day,
        sleep_hours=sleep_hours,
        **values,
        **scores.as_dict(),
        notes=notes,
    )


def _reject(message: str) -> ParseResult:
    logger.debug("Rejected daily report: %s", message)
    return ParseResult.failure(message)


def parse_report(text: str, clock: Optional[Clock] = None) -> ParseResult:
    """Parse ``"<sleep> <bed> <workout> <eat> <block1> <block2> <anchor> [notes...]"``.

    Flags are ``Y``/``N`` in any case. Anything after the seventh token becomes
    the reading's notes. The reading is dated with ``clock.today()``.
    """

    tokens = text.split()
    if len(tokens) < EXPECTED_TOKENS:
        return _reject(f"Expected {EXPECTED_TOKENS} values, got {len(tokens)}.\n\n{USAGE}")

    try:
        sleep_hours = _parse_sleep(tokens[0])
        flags = []
        for token, label in zip(tokens[1:EXPECTED_TOKENS], FIELD_LABELS):
            if token.upper() not in ("Y", "N"):
                raise _Rejected(f'"{label}" must be Y or N. Got: "{token}"')
            flags.append(token.upper() == "Y")
    except _Rejected as exc:
        return _reject(str(exc))

    notes = " ".join(tokens[EXPECTED_TOKENS:])
    clock = clock or default_clock()
    return ParseResult.success(_build(clock.today(), sleep_hours, flags, notes))


def parse_form(payload: Mapping[str, Any], clock: Optional[Clock] = None) -> ParseResult:
    """Validate a submitted check-in form.

    Flag values may be booleans, ``0``/``1`` or ``"Y"``/``"N"`` strings. An
    explicit ``date`` must be ``YYYY-MM-DD``; without one the clock decides.
    """

    try:
        if "sleep_hours" not in payload:
            raise _Rejected("Missing field: Sleep hours")
        sleep_hours = _parse_sleep(payload["sleep_hours"])

        flags = []
        for name, label in zip(FLAG_FIELDS, FIELD_LABELS):
            if name not in payload or payload[name] is None:
                raise _Rejected(f"Missing field: {label}")
            flags.append(_parse_flag(payload[name], label))

        day = payload.get("date")
        if day:
            day = _parse_date(day)
    except _Rejected as exc:
        return _reject(str(exc))

    notes = str(payload.get("notes") or "").strip()
    if not day:
        day = (clock or default_clock()).today()
    return ParseResult.success(_build(day, sleep_hours, flags, notes))
