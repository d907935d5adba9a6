# duty_core/allocator.py
from __future__ import annotations
import logging
from typing import Dict, List, Optional
import numpy as np

from .calendar_model import Calendar, clear_assignments
from .feasibility import feasible_candidates, is_feasible

logger = logging.getLogger(__name__)


def allocate(
    roster: List[str],
    days: Calendar,
    rng: Optional[np.random.Generator] = None,
) -> Calendar:
    """Greedy month fill:
    - wipe every day's assignment
    - walk days 1..N, slot 0 then slot 1
    - a fixed person takes the slot only if feasible, otherwise the slot stays empty
    - free slots go to the feasible person with the fewest duties so far,
      ties broken uniformly at random
    """
    if rng is None:
        rng = np.random.default_rng()

    clear_assignments(days)
    usage: Dict[str, int] = {p: 0 for p in roster}
    filled = empty = 0

    for day in sorted(days):
        cfg = days[day]
        for slot in range(cfg.slots):
            fixed = cfg.fixed[slot]
            if fixed:
                if is_feasible(fixed, day, slot, days):
                    cfg.assigned[slot] = fixed
                    usage[fixed] = usage.get(fixed, 0) + 1
                    filled += 1
                else:
                    logger.debug("Day %d slot %d: fixed %r is not feasible, left empty", day, slot, fixed)
                    empty += 1
                continue

            feasible = feasible_candidates(roster, day, slot, days)
            if not feasible:
                logger.debug("Day %d slot %d: no feasible candidate", day, slot)
                empty += 1
                continue
            min_u = min(usage[p] for p in feasible)
            cands = [p for p in feasible if usage[p] == min_u]
            chosen = cands[int(rng.integers(len(cands)))]
            cfg.assigned[slot] = chosen
            usage[chosen] += 1
            filled += 1

    logger.info("Allocated %d slot(s) over %d day(s); %d left empty", filled, len(days), empty)
    return days
