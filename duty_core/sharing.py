# duty_core/sharing.py
"""
Share token: percent-encoded compact JSON of the whole session.

    {"people": [...], "days": [null, {...}, ...], "year": 2025, "month": 3, "version": 1}

`days` is indexed by day number, index 0 is always null. Tokens without a
`version` are read as version 1.
"""
from __future__ import annotations
import json
import logging
from typing import Any, Dict, List, Mapping
from urllib.parse import quote, unquote, urlsplit

from pydantic import ValidationError as PydanticValidationError

from .constants import REQUIRED_SHARE_KEYS, SHARE_PARAM, SHARE_ROUTE, SHARE_VERSION
from .errors import ParseError
from .models import DaySlotConfig, DutyState, Period

logger = logging.getLogger(__name__)

# characters encodeURIComponent leaves alone
_URI_SAFE = "!~*'()"


def state_to_payload(roster: List[str], days: Mapping[int, DaySlotConfig], period: Period) -> Dict[str, Any]:
    day_list: List[Any] = [None]
    for d in range(1, period.days_in_month + 1):
        cfg = days.get(d)
        day_list.append(cfg.model_dump() if cfg is not None else None)
    return {
        "people": list(roster),
        "days": day_list,
        "year": period.year,
        "month": period.month,
        "version": SHARE_VERSION,
    }


def _first_error(e: PydanticValidationError) -> str:
    err = e.errors()[0]
    loc = ".".join(str(x) for x in err.get("loc", ()))
    return f"{loc}: {err['msg']}" if loc else err["msg"]


def _day_items(raw_days: Any):
    if isinstance(raw_days, list):
        return [(i, v) for i, v in enumerate(raw_days) if i > 0]
    if isinstance(raw_days, dict):
        items = []
        for k, v in raw_days.items():
            try:
                items.append((int(k), v))
            except (TypeError, ValueError):
                raise ParseError(f"Day key {k!r} is not a number") from None
        return items
    raise ParseError("'days' must be a list or a mapping")


def state_from_payload(obj: Any) -> DutyState:
    """Validate a decoded payload and rebuild the state it describes."""
    if not isinstance(obj, dict):
        raise ParseError("Share payload must be a JSON object")
    missing = [k for k in REQUIRED_SHARE_KEYS if obj.get(k) is None]
    if missing:
        raise ParseError(f"Share payload is missing: {', '.join(missing)}")

    version = obj.get("version", 1)
    if not isinstance(version, int) or version > SHARE_VERSION:
        raise ParseError(f"Unsupported share version: {version!r}")

    people = obj["people"]
    if not isinstance(people, list) or not all(isinstance(p, str) and p.strip() for p in people):
        raise ParseError("'people' must be a list of non-blank names")
    if len(set(people)) != len(people):
        raise ParseError("'people' contains duplicate names")

    try:
        period = Period(year=obj["year"], month=obj["month"])
    except PydanticValidationError as e:
        raise ParseError(f"Invalid period: {_first_error(e)}") from e

    n = period.days_in_month
    days: Dict[int, DaySlotConfig] = {d: DaySlotConfig() for d in range(1, n + 1)}
    for d, raw in _day_items(obj["days"]):
        if raw is None:
            continue
        if not 1 <= d <= n:
            raise ParseError(f"Day {d} is outside 1..{n} for {period.label}")
        try:
            days[d] = DaySlotConfig.model_validate(raw)
        except PydanticValidationError as e:
            raise ParseError(f"Invalid day {d}: {_first_error(e)}") from e

    return DutyState(people=list(people), days=days, year=period.year, month=period.month)


def export_state(roster: List[str], days: Mapping[int, DaySlotConfig], period: Period) -> str:
    payload = state_to_payload(roster, days, period)
    text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return quote(text, safe=_URI_SAFE)


def import_state(token: str) -> DutyState:
    if not token or not token.strip():
        raise ParseError("Empty share token")
    try:
        obj = json.loads(unquote(token.strip()))
    except (ValueError, RecursionError) as e:
        raise ParseError(f"Share token is not valid JSON: {e}") from e
    state = state_from_payload(obj)
    logger.debug("Imported %s with %d people", state.period.label, len(state.people))
    return state


def share_url(base_url: str, token: str) -> str:
    return f"{base_url.rstrip('/')}{SHARE_ROUTE}?{SHARE_PARAM}={token}"


def token_from_url(url: str) -> str:
    """Raw (still percent-encoded) `config` value from the query or the hash route."""
    parts = urlsplit(url)
    queries = [parts.query]
    if "?" in parts.fragment:
        queries.append(parts.fragment.split("?", 1)[1])
    for q in queries:
        for pair in q.split("&"):
            key, sep, value = pair.partition("=")
            if key == SHARE_PARAM and sep and value:
                return value
    raise ParseError(f"No '{SHARE_PARAM}' parameter in URL")
