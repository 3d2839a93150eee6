from datetime import date, datetime, timedelta

import pytest

from farmstead.services.status import derive_inventory_status, derive_task_status, local_today

TODAY = date(2026, 10, 17)

SWEEP = [
    (TODAY - timedelta(days=3650), "overdue"),
    (TODAY - timedelta(days=1), "overdue"),
    (TODAY, "today"),
    (TODAY + timedelta(days=1), "upcoming"),
    (TODAY + timedelta(days=3650), "upcoming"),
]


@pytest.mark.parametrize("due_date, expected", SWEEP)
def test_open_task_status_follows_due_date(due_date, expected):
    assert derive_task_status(due_date, False, TODAY) == expected


@pytest.mark.parametrize("due_date", [d for d, _ in SWEEP])
def test_completed_wins_over_any_due_date(due_date):
    assert derive_task_status(due_date, True, TODAY) == "completed"


def test_time_of_day_is_ignored():
    late_evening = datetime(2026, 10, 17, 23, 59)
    early_morning = datetime(2026, 10, 17, 0, 1)
    assert derive_task_status(late_evening, False, TODAY) == "today"
    assert derive_task_status(TODAY, False, early_morning) == "today"


@pytest.mark.parametrize("quantity, threshold, expected", [
    (5, 10, "low"),
    (10, 10, "good"),
    (12, 10, "good"),
    (9.99, 10, "low"),
    (0, 0, "good"),
    (0, 0.01, "low"),
])
def test_inventory_status(quantity, threshold, expected):
    assert derive_inventory_status(quantity, threshold) == expected


def test_local_today_respects_zone():
    # UTC+14 and UTC-11 never share a calendar date
    ahead = local_today("Pacific/Kiritimati")
    behind = local_today("Pacific/Pago_Pago")
    assert timedelta(days=1) <= ahead - behind <= timedelta(days=2)


def test_local_today_defaults_to_configured_zone(monkeypatch):
    from farmstead.core.config import settings

    monkeypatch.setattr(settings, "TIMEZONE", "Pacific/Kiritimati")
    assert local_today() == local_today("Pacific/Kiritimati")
