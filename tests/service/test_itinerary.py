import pendulum

from almanac.service.itinerary import (
    default_month,
    month_weeks,
    plan_summary,
    sorted_plans,
)


def plan(note: str, time: str = "", is_leave: bool = False) -> dict:
    return {"note": note, "time": time, "is_leave": is_leave}


def test_sorted_plans_ascend_by_date():
    plans = {
        "2026-05-01": plan("May"),
        "2026-01-20": plan("January"),
        "2026-03-02": plan("March"),
    }
    assert [key for key, _ in sorted_plans(plans)] == [
        "2026-01-20",
        "2026-03-02",
        "2026-05-01",
    ]


def test_plan_summary_prefixes_time():
    assert plan_summary(plan("Dentist", "14:30")) == "14:30 - Dentist"
    assert plan_summary(plan("Dentist")) == "Dentist"


def test_month_weeks_start_on_sunday(engine):
    # 1 January 2026 is a Thursday
    weeks = month_weeks(engine, {}, 2026, 1)

    assert len(weeks) == 5
    assert all(len(week) == 7 for week in weeks)
    assert weeks[0][:4] == [None, None, None, None]
    first = weeks[0][4]
    assert first is not None
    assert first["date"] == pendulum.date(2026, 1, 1)
    assert first["fact"].is_public_holiday
    assert first["plan"] is None


def test_month_weeks_without_padding(engine):
    # February 2026 starts on a Sunday and has exactly four weeks
    weeks = month_weeks(engine, {}, 2026, 2)

    assert len(weeks) == 4
    assert all(cell is not None for week in weeks for cell in week)


def test_month_weeks_attach_plans(engine):
    plans = {"2026-03-25": plan("Trip", is_leave=True)}
    weeks = month_weeks(engine, plans, 2026, 3)

    cells = [cell for week in weeks for cell in week if cell is not None]
    assert len(cells) == 31
    trip = [cell for cell in cells if cell["plan"] is not None]
    assert len(trip) == 1
    assert trip[0]["date"] == pendulum.date(2026, 3, 25)
    assert trip[0]["fact"].remark == "Cuti Penggal 1"
    # trailing padding after 31 March (a Tuesday)
    assert weeks[-1][3:] == [None, None, None, None]


def test_default_month(engine):
    assert default_month(engine, pendulum.date(2026, 6, 15)) == (2026, 6)
    assert default_month(engine, pendulum.date(2027, 6, 15)) == (2026, 1)
