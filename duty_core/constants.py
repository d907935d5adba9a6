# FILE: duty_core/constants.py
from __future__ import annotations

# --- Slots per day ---
MIN_SLOTS = 1
MAX_SLOTS = 2
DEFAULT_SLOTS = 2
ALLOWED_SLOTS = (1, 2)

# --- Calendar ---
MIN_YEAR = 1
MAX_YEAR = 9999

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# Sunday-first, as the month grid is laid out
WEEKDAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# --- Session defaults ---
DEFAULT_YEAR = 2025
DEFAULT_MONTH = 3

DEFAULT_PEOPLE = [
    "Deeksha",
    "Isha",
    "Pratheek",
    "Dhanush",
    "Annapoorna",
    "Shreshta",
    "Sushruth",
    "Nikhitha",
]

# --- Share token ---
SHARE_VERSION = 1
SHARE_PARAM = "config"
SHARE_ROUTE = "/#/share"
REQUIRED_SHARE_KEYS = ("people", "days", "year", "month")


def month_name(month: int) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"Unknown month: {month}")
    return MONTH_NAMES[month - 1]
