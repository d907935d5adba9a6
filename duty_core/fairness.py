# FILE: duty_core/fairness.py
from __future__ import annotations
from typing import Dict, List, Tuple
import pandas as pd

from .models import DaySlotConfig, DutyStats


def compute_stats(roster: List[str], days: Dict[int, DaySlotConfig]) -> Dict[str, DutyStats]:
    """
    Total and single-slot-day duties per person, read straight from `assigned`.
    Roster members come first in roster order; names no longer on the roster
    but still present in `assigned` follow in order of first appearance.
    """
    stats: Dict[str, DutyStats] = {p: DutyStats() for p in roster}
    for day in sorted(days):
        if day < 1:
            continue
        cfg = days[day]
        for person in cfg.assigned:
            if not person:
                continue
            s = stats.setdefault(person, DutyStats())
            s.total += 1
            if cfg.slots == 1:
                s.single += 1
    return stats


def check_evenness(counts: List[int]) -> bool:
    return not counts or (max(counts) - min(counts) <= 1)


def unfilled_slots(days: Dict[int, DaySlotConfig]) -> List[Tuple[int, int]]:
    """(day, slot) pairs the last allocation could not fill."""
    return [
        (day, slot)
        for day in sorted(days)
        for slot, person in enumerate(days[day].assigned)
        if not person
    ]


def stats_dataframe(roster: List[str], days: Dict[int, DaySlotConfig]) -> pd.DataFrame:
    stats = compute_stats(roster, days)
    on_roster = set(roster)
    rows = [
        {
            "person": name,
            "total_duties": s.total,
            "single_duties": s.single,
            "on_roster": name in on_roster,
        }
        for name, s in stats.items()
    ]
    return pd.DataFrame(rows, columns=["person", "total_duties", "single_duties", "on_roster"])
