# FILE: tests/test_io.py
import numpy as np
import pytest
from duty_core.errors import ParseError
from duty_core.export_pdf import render_schedule_pdf
from duty_core.io import (
    dump_state_yaml, load_roster_csv, load_state_yaml, save_roster_csv_bytes,
    save_schedule_csv_bytes, schedule_to_dataframe,
)
from duty_core.session import DutySession


def test_roster_csv_round_trip():
    data = save_roster_csv_bytes(["Isha", "Deeksha"])
    assert load_roster_csv(data) == ["Isha", "Deeksha"]


def test_roster_csv_skips_blank_and_duplicates():
    data = b"Name,notes\n Isha ,x\n,\nIsha,\nNikhitha,\n"
    assert load_roster_csv(data) == ["Isha", "Nikhitha"]


def test_roster_csv_requires_name_column():
    with pytest.raises(ParseError):
        load_roster_csv(b"person\nA\n")


def test_schedule_dataframe_and_csv():
    s = DutySession(people=["A", "B", "C", "D"], year=2025, month=3, rng=np.random.default_rng(0))
    s.configure_day(1, 2, [None, None], ["A"])
    s.configure_day(2, 1, ["A", None], ["B"])
    s.allocate()
    df = schedule_to_dataframe(s.days, s.period)
    row = df[df["day"] == 2].iloc[0]
    assert row["slots"] == 1
    assert row["slot_1"] == "A"
    assert row["slot_2"] == ""
    assert row["forbidden"] == "B"
    text = save_schedule_csv_bytes(s.days, s.period).decode("utf-8")
    assert text.splitlines()[0] == "day,weekday,slots,slot_1,slot_2,fixed,forbidden"


def test_state_yaml_round_trip():
    s = DutySession(people=["A", "B", "C"], year=2024, month=2, rng=np.random.default_rng(1))
    s.allocate()
    state = load_state_yaml(dump_state_yaml(s.state))
    assert state.people == s.people
    assert state.days == s.days
    with pytest.raises(ParseError):
        load_state_yaml("people: [A]\n")


def test_render_schedule_pdf():
    s = DutySession(people=["A", "B", "C"], year=2025, month=3, rng=np.random.default_rng(1))
    s.allocate()
    pdf = render_schedule_pdf(s.state)
    assert pdf.startswith(b"%PDF")
