# duty_core/io.py
from __future__ import annotations
import io
from typing import Dict, List

import pandas as pd
import yaml

from .constants import WEEKDAY_HEADERS
from .errors import ParseError
from .models import DaySlotConfig, DutyState, Period
from .roster import add_person
from .sharing import state_from_payload, state_to_payload

ROSTER_COLUMNS = ["name"]
SCHEDULE_COLUMNS = ["day", "weekday", "slots", "slot_1", "slot_2", "fixed", "forbidden"]


def load_roster_csv(file_like) -> List[str]:
    """Names from a one-column CSV; blanks and repeats are skipped."""
    if isinstance(file_like, (bytes, bytearray)):
        file_like = io.BytesIO(file_like)
    df = pd.read_csv(file_like, dtype=str)
    cols = {c.strip().lower(): c for c in df.columns}
    if "name" not in cols:
        raise ParseError(f"Missing required columns: {ROSTER_COLUMNS}")
    people: List[str] = []
    for v in df[cols["name"]].fillna(""):
        add_person(people, v)
    return people


def save_roster_csv_bytes(people: List[str]) -> bytes:
    buf = io.StringIO()
    pd.DataFrame({"name": people}, columns=ROSTER_COLUMNS).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def schedule_to_dataframe(days: Dict[int, DaySlotConfig], period: Period) -> pd.DataFrame:
    """One row per day; empty slots are blank strings."""
    rows = []
    for d in sorted(days):
        cfg = days[d]
        assigned = list(cfg.assigned) + [None] * (2 - len(cfg.assigned))
        rows.append({
            "day": d,
            "weekday": WEEKDAY_HEADERS[(period.first_weekday + d - 1) % 7],
            "slots": cfg.slots,
            "slot_1": assigned[0] or "",
            "slot_2": (assigned[1] or "") if cfg.slots == 2 else "",
            "fixed": ", ".join(f for f in cfg.fixed if f),
            "forbidden": ", ".join(cfg.forbidden),
        })
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def save_schedule_csv_bytes(days: Dict[int, DaySlotConfig], period: Period) -> bytes:
    buf = io.StringIO()
    schedule_to_dataframe(days, period).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def dump_state_yaml(state: DutyState) -> str:
    payload = state_to_payload(state.people, state.days, state.period)
    return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)


def load_state_yaml(text: str) -> DutyState:
    try:
        obj = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseError(f"State file is not valid YAML: {e}") from e
    return state_from_payload(obj)
