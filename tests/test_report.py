from activity_tracker.models import LogInterval
from activity_tracker.services.report import aggregate, generate_report


def test_time_is_split_across_tasks():
    log = [
        LogInterval(tasks=["X", "Y"], start="09:00", end="09:30"),
        LogInterval(tasks=["X"], start="09:30", end="10:00"),
    ]
    assert aggregate(log) == {"X": 45, "Y": 15}
    assert generate_report(log) == (
        "| task | approx | exact |\n"
        "| -- | -- | -- |\n"
        "| X | an hour | 00:45 |\n"
        "| Y | 15 minutes | 00:15 |\n"
        "| | an hour | 01:00 |"
    )


def test_open_intervals_are_not_counted():
    log = [
        LogInterval(tasks=["A"], start="09:00", end="09:10"),
        LogInterval(tasks=["A"], start="09:10"),
    ]
    assert aggregate(log) == {"A": 10}


def test_no_recorded_time_means_no_report():
    assert generate_report([]) is None
    assert generate_report([LogInterval(tasks=["A"], start="09:00")]) is None
    assert generate_report([LogInterval(tasks=[], start="09:00", end="09:30")]) is None


def test_midnight_interval_in_report():
    report = generate_report([LogInterval(tasks=["A"], start="23:50", end="00:10")])
    assert "| A | 20 minutes | 00:20 |" in report


def test_ties_follow_checklist_order():
    log = [
        LogInterval(tasks=["B"], start="10:00", end="10:10"),
        LogInterval(tasks=["A"], start="10:10", end="10:20"),
    ]
    rows = generate_report(log, tasks=["A", "B"]).splitlines()
    assert rows[2].startswith("| A |")
    assert rows[3].startswith("| B |")
