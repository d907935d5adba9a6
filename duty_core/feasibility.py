# FILE: duty_core/feasibility.py
from __future__ import annotations
from typing import Dict, List

from .models import DaySlotConfig


def is_feasible(person: str, day: int, slot_index: int, days: Dict[int, DaySlotConfig]) -> bool:
    """
    May `person` take `slot_index` on `day`?
    Reads the day's current `assigned` and the previous day's, whatever they hold.
    """
    cfg = days[day]
    if person in cfg.forbidden:
        return False
    if any(p == person for i, p in enumerate(cfg.assigned) if i != slot_index):
        return False
    prev = days.get(day - 1)
    if prev is not None and prev.holds(person):
        return False
    return True


def feasible_candidates(roster: List[str], day: int, slot_index: int, days: Dict[int, DaySlotConfig]) -> List[str]:
    return [p for p in roster if is_feasible(p, day, slot_index, days)]
