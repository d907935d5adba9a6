# FILE: tests/test_sharing.py
import json
from urllib.parse import quote, unquote

import numpy as np
import pytest
from duty_core.allocator import allocate
from duty_core.calendar_model import configure_day, set_period
from duty_core.errors import ParseError
from duty_core.sharing import export_state, import_state, share_url, token_from_url


def _allocated_month():
    people = ["A", "B", "C", "Dé"]
    period, days = set_period(2025, 3)
    configure_day(days, 1, 2, ["A", None], ["C"])
    configure_day(days, 7, 1, [None, None], ["B"])
    allocate(people, days, rng=np.random.default_rng(9))
    return people, days, period


def test_round_trip_reproduces_state():
    people, days, period = _allocated_month()
    state = import_state(export_state(people, days, period))
    assert state.people == people
    assert state.period == period
    assert state.days == days


def test_token_is_url_safe_reference_json():
    people, days, period = _allocated_month()
    token = export_state(people, days, period)
    assert all(ch not in token for ch in " {}\":,&?#/")
    obj = json.loads(unquote(token))
    assert obj["days"][0] is None
    assert len(obj["days"]) == 32
    assert set(obj["days"][1]) == {"slots", "fixed", "forbidden", "assigned"}
    assert (obj["year"], obj["month"], obj["version"]) == (2025, 3, 1)


def _token(obj):
    return quote(json.dumps(obj))


def test_missing_year_is_parse_error():
    with pytest.raises(ParseError):
        import_state(_token({"people": ["A"], "days": [None], "month": 3}))


@pytest.mark.parametrize("token", ["", "%7Bnot-json", quote("[1, 2]"), quote("null")])
def test_malformed_tokens(token):
    with pytest.raises(ParseError):
        import_state(token)


def test_reference_token_without_version_and_empty_assigned():
    days = [None] + [{"slots": 2, "fixed": [None, None], "forbidden": [], "assigned": []} for _ in range(30)]
    days[3] = {"slots": 1, "fixed": ["A", None], "forbidden": ["B"], "assigned": []}
    state = import_state(_token({"people": ["A", "B"], "days": days, "year": 2025, "month": 4}))
    assert state.days[3].assigned == [None]
    assert state.days[3].forbidden == ["B"]
    assert len(state.days) == 30


@pytest.mark.parametrize("payload", [
    {"people": ["A"], "days": [None, {"slots": 3}], "year": 2025, "month": 3},
    {"people": ["A"], "days": [None, {"slots": 2, "assigned": ["A"]}], "year": 2025, "month": 3},
    {"people": ["A"], "days": [None, {"slots": 2, "fixed": 5}], "year": 2025, "month": 3},
    {"people": ["A"], "days": [None, {"slots": 2, "fixed": True}], "year": 2025, "month": 3},
    {"people": ["A"], "days": [None, {"slots": 2, "fixed": 3.5}], "year": 2025, "month": 3},
    {"people": ["A"], "days": [None, {"slots": 2, "fixed": "AB"}], "year": 2025, "month": 3},
    {"people": ["A"], "days": {"40": {"slots": 2}}, "year": 2025, "month": 3},
    {"people": ["A"], "days": [None], "year": 2025, "month": 13},
    {"people": ["A", "A"], "days": [None], "year": 2025, "month": 3},
    {"people": ["A"], "days": [None], "year": 2025, "month": 3, "version": 99},
])
def test_invalid_payloads_rejected(payload):
    with pytest.raises(ParseError):
        import_state(_token(payload))


def test_deeply_nested_token_is_parse_error():
    with pytest.raises(ParseError):
        import_state(quote("[" * 100000 + "]" * 100000))


def test_share_url_round_trip():
    people, days, period = _allocated_month()
    token = export_state(people, days, period)
    url = share_url("https://example.org/duty-allocator/", token)
    assert url.startswith("https://example.org/duty-allocator/#/share?config=")
    assert token_from_url(url) == token
    assert token_from_url(f"https://example.org/share?config={token}&x=1") == token
    with pytest.raises(ParseError):
        token_from_url("https://example.org/#/share")
