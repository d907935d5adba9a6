# FILE: duty_core/roster.py
from __future__ import annotations
import logging
from typing import Dict, List

from .models import DaySlotConfig

logger = logging.getLogger(__name__)


def add_person(roster: List[str], name: str) -> bool:
    """Append a trimmed name; blanks and exact duplicates are ignored."""
    name = name.strip() if isinstance(name, str) else ""
    if not name or name in roster:
        return False
    roster.append(name)
    return True


def remove_person(roster: List[str], days: Dict[int, DaySlotConfig], name: str) -> bool:
    """
    Drop `name` from the roster and from every day's fixed / forbidden entries.
    Existing `assigned` entries are left alone until the next allocation.
    """
    found = name in roster
    roster[:] = [p for p in roster if p != name]
    for cfg in days.values():
        cfg.fixed = [None if f == name else f for f in cfg.fixed]
        cfg.forbidden = [f for f in cfg.forbidden if f != name]
    if found:
        logger.debug("Removed %r from roster", name)
    return found
