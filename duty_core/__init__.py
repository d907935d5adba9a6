# FILE: duty_core/__init__.py
"""
duty_core package: month calendar model, feasibility rules, fairness allocator,
duty statistics, roster edits, share tokens and report exports.
"""
from .allocator import allocate
from .errors import DutyError, ParseError, ValidationError
from .feasibility import is_feasible
from .models import AppConfig, DaySlotConfig, DutyState, DutyStats, Period
from .session import DutySession

__all__ = [
    "models",
    "calendar_model",
    "feasibility",
    "allocator",
    "fairness",
    "roster",
    "sharing",
    "session",
    "config",
    "io",
    "export_pdf",
    "allocate",
    "is_feasible",
    "AppConfig",
    "DaySlotConfig",
    "DutyError",
    "DutyState",
    "DutyStats",
    "DutySession",
    "ParseError",
    "Period",
    "ValidationError",
]
