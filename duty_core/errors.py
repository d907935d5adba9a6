# FILE: duty_core/errors.py
"""Structural failures. Infeasible slots are never errors, they stay empty."""
from __future__ import annotations


class DutyError(ValueError):
    pass


class ValidationError(DutyError):
    """Invalid period, day number or slot count. Raised before any mutation."""


class ParseError(DutyError):
    """Malformed or incomplete share token / state file."""
