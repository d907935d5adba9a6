# FILE: tests/test_fairness.py
from duty_core.calendar_model import configure_day, set_period
from duty_core.fairness import check_evenness, compute_stats, stats_dataframe, unfilled_slots


def test_evenness_true_and_false():
    assert check_evenness([2, 2, 3, 2])
    assert not check_evenness([1, 5, 1, 1])
    assert check_evenness([])


def test_single_slot_days_count_twice_over():
    _, days = set_period(2025, 3)
    configure_day(days, 1, 1, [None, None], [])
    days[1].assigned = ["A"]
    days[2].assigned = ["A", "B"]
    stats = compute_stats(["A", "B", "C"], days)
    assert (stats["A"].total, stats["A"].single) == (2, 1)
    assert (stats["B"].total, stats["B"].single) == (1, 0)
    assert (stats["C"].total, stats["C"].single) == (0, 0)


def test_total_matches_filled_slots_including_stale_names():
    _, days = set_period(2025, 2)
    days[1].assigned = ["A", "Gone"]
    days[3].assigned = [None, "B"]
    stats = compute_stats(["A", "B"], days)
    assert list(stats) == ["A", "B", "Gone"]
    filled = sum(1 for cfg in days.values() for p in cfg.assigned if p)
    assert sum(s.total for s in stats.values()) == filled == 3


def test_compute_stats_does_not_mutate():
    _, days = set_period(2025, 3)
    days[4].assigned = ["A", None]
    before = {d: list(c.assigned) for d, c in days.items()}
    compute_stats(["A"], days)
    compute_stats(["A"], days)
    assert {d: list(c.assigned) for d, c in days.items()} == before


def test_unfilled_slots_and_dataframe():
    _, days = set_period(2025, 2)
    for cfg in days.values():
        cfg.assigned = ["A", "B"]
    days[2].assigned = ["A", None]
    assert unfilled_slots(days) == [(2, 1)]

    df = stats_dataframe(["B", "A", "C"], days)
    assert list(df.columns) == ["person", "total_duties", "single_duties", "on_roster"]
    assert df["person"].tolist() == ["B", "A", "C"]
    assert df.set_index("person").loc["A", "total_duties"] == 28
    assert df.set_index("person").loc["B", "total_duties"] == 27
