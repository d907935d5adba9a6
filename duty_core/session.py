# duty_core/session.py
"""
DutySession: one owned roster + calendar + period.

Not thread-safe; a host serving several sessions keeps one lock (or one
worker) per session.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from . import calendar_model, fairness, io as duty_io, roster as roster_ops, sharing
from .allocator import allocate
from .constants import DEFAULT_MONTH, DEFAULT_YEAR
from .errors import ValidationError
from .models import AppConfig, DaySlotConfig, DutyState, DutyStats, Period

logger = logging.getLogger(__name__)


class DutySession:
    def __init__(
        self,
        people: Optional[Iterable[str]] = None,
        year: int = DEFAULT_YEAR,
        month: int = DEFAULT_MONTH,
        rng: Optional[np.random.Generator] = None,
        share_base_url: str = "",
    ):
        self.people: List[str] = []
        for name in people or ():
            roster_ops.add_person(self.people, name)
        self.period, self.days = calendar_model.set_period(year, month)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.share_base_url = share_base_url

    @classmethod
    def from_config(cls, config: AppConfig) -> "DutySession":
        return cls(
            people=config.people,
            year=config.year,
            month=config.month,
            rng=np.random.default_rng(config.random_seed),
            share_base_url=config.share_base_url,
        )

    @classmethod
    def from_state(cls, state: DutyState, rng: Optional[np.random.Generator] = None) -> "DutySession":
        session = cls(year=state.year, month=state.month, rng=rng)
        session._replace(state)
        return session

    # ---- state ----
    @property
    def state(self) -> DutyState:
        return DutyState(people=list(self.people), days=self.days, year=self.period.year, month=self.period.month)

    def _replace(self, state: DutyState) -> None:
        self.people = list(state.people)
        self.days = dict(state.days)
        self.period = state.period

    # ---- roster ----
    def add_person(self, name: str) -> bool:
        return roster_ops.add_person(self.people, name)

    def remove_person(self, name: str) -> bool:
        return roster_ops.remove_person(self.people, self.days, name)

    # ---- calendar ----
    def set_period(self, year: int, month: int) -> Period:
        self.period, self.days = calendar_model.set_period(year, month)
        logger.info("Period set to %s; calendar reset", self.period.label)
        return self.period

    def configure_day(
        self,
        day: int,
        slots: int,
        fixed: Sequence[Optional[str]] = (None, None),
        forbidden: Iterable[str] = (),
    ) -> DaySlotConfig:
        return calendar_model.configure_day(self.days, day, slots, fixed, forbidden)

    def get_day(self, day: int) -> DaySlotConfig:
        return calendar_model.get_day(self.days, day)

    # ---- allocation & stats ----
    def allocate(self) -> Dict[int, DaySlotConfig]:
        return allocate(self.people, self.days, rng=self.rng)

    def compute_stats(self) -> Dict[str, DutyStats]:
        return fairness.compute_stats(self.people, self.days)

    def unfilled_slots(self) -> List[Tuple[int, int]]:
        return fairness.unfilled_slots(self.days)

    def stats_dataframe(self) -> pd.DataFrame:
        return fairness.stats_dataframe(self.people, self.days)

    def schedule_dataframe(self) -> pd.DataFrame:
        return duty_io.schedule_to_dataframe(self.days, self.period)

    # ---- sharing ----
    def export_state(self) -> str:
        return sharing.export_state(self.people, self.days, self.period)

    @classmethod
    def import_state(cls, token: str, rng: Optional[np.random.Generator] = None) -> "DutySession":
        return cls.from_state(sharing.import_state(token), rng=rng)

    def load_state(self, token: str) -> None:
        """Replace this session from a token; on ParseError nothing changes."""
        state = sharing.import_state(token)
        self._replace(state)
        logger.info("Loaded shared state for %s", self.period.label)

    def share_url(self, base_url: Optional[str] = None) -> str:
        base = base_url if base_url is not None else self.share_base_url
        if not base:
            raise ValidationError("No base URL to build a share link from")
        return sharing.share_url(base, self.export_state())
