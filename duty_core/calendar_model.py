# duty_core/calendar_model.py
"""
Month calendar: one DaySlotConfig per day number 1..N.

Changing the period rebuilds every day from defaults; per-day edits always
discard the day's previous allocation.
"""
from __future__ import annotations
import calendar
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from .constants import ALLOWED_SLOTS
from .errors import ValidationError
from .models import DaySlotConfig, Period

logger = logging.getLogger(__name__)

Calendar = Dict[int, DaySlotConfig]


def make_period(year: int, month: int) -> Period:
    try:
        return Period(year=year, month=month)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid period {year}-{month}: {e.errors()[0]['msg']}") from e


def days_in_month(year: int, month: int) -> int:
    return make_period(year, month).days_in_month


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st, 0=Sun..6=Sat."""
    return make_period(year, month).first_weekday


def month_weeks(year: int, month: int) -> List[List[Optional[int]]]:
    """Sunday-first week rows of day numbers, padded with None."""
    make_period(year, month)
    cal = calendar.Calendar(firstweekday=calendar.SUNDAY)
    return [[d or None for d in week] for week in cal.monthdayscalendar(year, month)]


def build_days(period: Period) -> Calendar:
    return {d: DaySlotConfig() for d in range(1, period.days_in_month + 1)}


def set_period(year: int, month: int) -> tuple[Period, Calendar]:
    """Validate (year, month) and return it with a freshly defaulted calendar."""
    period = make_period(year, month)
    days = build_days(period)
    logger.debug("Calendar reset to %s (%d days)", period.label, len(days))
    return period, days


def get_day(days: Calendar, day: int) -> DaySlotConfig:
    if day not in days:
        raise ValidationError(f"Day {day} is outside 1..{len(days)}")
    return days[day]


def configure_day(
    days: Calendar,
    day: int,
    slots: int,
    fixed: Sequence[Optional[str]] = (None, None),
    forbidden: Iterable[str] = (),
) -> DaySlotConfig:
    """Replace one day's constraints; the day's assignment is cleared."""
    get_day(days, day)
    if slots not in ALLOWED_SLOTS:
        raise ValidationError(f"Slot count must be one of {ALLOWED_SLOTS}, got {slots}")
    if isinstance(fixed, str) or isinstance(forbidden, str):
        raise ValidationError(f"fixed and forbidden for day {day} must be lists of names, not a string")
    try:
        cfg = DaySlotConfig(slots=slots, fixed=list(fixed), forbidden=list(forbidden))
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid configuration for day {day}: {e.errors()[0]['msg']}") from e
    days[day] = cfg
    return cfg


def clear_assignments(days: Calendar) -> None:
    for cfg in days.values():
        cfg.assigned = [None] * cfg.slots
