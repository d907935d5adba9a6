# duty_core/models.py
from __future__ import annotations
import calendar
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import (
    ALLOWED_SLOTS, DEFAULT_MONTH, DEFAULT_PEOPLE, DEFAULT_SLOTS, DEFAULT_YEAR,
    MAX_YEAR, MIN_YEAR, month_name,
)


def _check_year(v: int) -> int:
    if not MIN_YEAR <= v <= MAX_YEAR:
        raise ValueError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {v}")
    return v


def _check_month(v: int) -> int:
    if not 1 <= v <= 12:
        raise ValueError(f"month must be between 1 and 12, got {v}")
    return v


def _blank_to_none(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = str(v)
    return v if v.strip() else None


class Period(BaseModel):
    year: int
    month: int

    @field_validator("year")
    @classmethod
    def valid_year(cls, v):
        return _check_year(v)

    @field_validator("month")
    @classmethod
    def valid_month(cls, v):
        return _check_month(v)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def first_weekday(self) -> int:
        """0=Sun..6=Sat for the 1st of the month."""
        return (calendar.weekday(self.year, self.month, 1) + 1) % 7

    @property
    def label(self) -> str:
        return f"{month_name(self.month)} {self.year}"


class DaySlotConfig(BaseModel):
    slots: int = DEFAULT_SLOTS
    fixed: List[Optional[str]] = Field(default_factory=lambda: [None, None])
    forbidden: List[str] = Field(default_factory=list)
    assigned: List[Optional[str]] = Field(default_factory=list)

    @field_validator("slots")
    @classmethod
    def check_slot_count(cls, v):
        if v not in ALLOWED_SLOTS:
            raise ValueError(f"slots must be one of {ALLOWED_SLOTS}, got {v}")
        return v

    @field_validator("fixed", mode="before")
    @classmethod
    def pad_fixed_pair(cls, v):
        if v is None:
            v = []
        if not isinstance(v, (list, tuple)):
            raise ValueError("fixed must be a list")
        v = list(v)
        if len(v) > 2:
            raise ValueError("fixed holds at most two entries")
        v = [_blank_to_none(x) for x in v]
        return v + [None] * (2 - len(v))

    @field_validator("forbidden")
    @classmethod
    def unique_forbidden(cls, v):
        out: List[str] = []
        for name in v:
            if name not in out:
                out.append(name)
        return out

    @model_validator(mode="after")
    def check_slot_shape(self):
        if self.slots == 1:
            self.fixed[1] = None
        if not self.assigned:
            self.assigned = [None] * self.slots
        elif len(self.assigned) != self.slots:
            raise ValueError(
                f"assigned has {len(self.assigned)} entries for a {self.slots}-slot day"
            )
        return self

    def holds(self, person: str) -> bool:
        return person in self.assigned


class DutyState(BaseModel):
    """Roster + calendar + period, the unit that is shared and restored."""
    people: List[str] = Field(default_factory=list)
    days: Dict[int, DaySlotConfig] = Field(default_factory=dict)
    year: int = DEFAULT_YEAR
    month: int = DEFAULT_MONTH

    @property
    def period(self) -> Period:
        return Period(year=self.year, month=self.month)


class DutyStats(BaseModel):
    total: int = 0
    single: int = 0


class AppConfig(BaseModel):
    year: int = DEFAULT_YEAR
    month: int = DEFAULT_MONTH
    people: List[str] = Field(default_factory=lambda: list(DEFAULT_PEOPLE))
    random_seed: Optional[int] = None
    share_base_url: str = ""

    @field_validator("year")
    @classmethod
    def valid_year(cls, v):
        return _check_year(v)

    @field_validator("month")
    @classmethod
    def valid_month(cls, v):
        return _check_month(v)

    @field_validator("people")
    @classmethod
    def clean_people(cls, v):
        out: List[str] = []
        for name in v:
            name = str(name).strip()
            if name and name not in out:
                out.append(name)
        return out
