import pendulum
import pytest

from almanac.service.leave import parse_entitlement, remaining_leave, used_leave


def plan(note: str, is_leave: bool) -> dict:
    return {"note": note, "time": "", "is_leave": is_leave}


def test_remaining_leave_subtracts_leave_days():
    plans = {
        "2026-03-23": plan("Trip", True),
        "2026-03-24": plan("Trip", True),
        "2026-03-25": plan("Dentist", False),
    }
    assert used_leave(plans) == 2
    assert remaining_leave({"entitlement": 14}, plans) == 12


def test_remaining_leave_with_no_plans_is_entitlement():
    assert remaining_leave({"entitlement": 14}, {}) == 14


def test_over_booked_leave_goes_negative():
    plans = {f"2026-04-{day:02d}": plan("Holiday", True) for day in range(1, 6)}
    assert remaining_leave({"entitlement": 3}, plans) == -2


def test_remaining_leave_reflects_latest_plans(plans, profile):
    assert remaining_leave(profile.get(), plans.list_all()) == 14
    plans.upsert(pendulum.date(2026, 4, 6), plan("Away", True))
    assert remaining_leave(profile.get(), plans.list_all()) == 13


@pytest.mark.parametrize(
    "text,expected",
    [
        ("14", 14),
        (" 20 ", 20),
        ("0", 0),
        ("+3", 3),
        ("", 0),
        ("abc", 0),
        ("1.5", 0),
        ("-3", 0),
    ],
)
def test_parse_entitlement(text, expected):
    assert parse_entitlement(text) == expected
