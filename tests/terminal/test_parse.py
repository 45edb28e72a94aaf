import pendulum
import pytest
import typer

from almanac.terminal.parse import parse_date, parse_month
from almanac.view import state as view_state


class TestParseDate:
    def test_none(self):
        assert parse_date(None) is None

    def test_iso_date(self):
        assert parse_date("2026-02-18") == pendulum.date(2026, 2, 18)

    def test_iso_date_with_whitespace(self):
        assert parse_date(" 2026-02-18 ") == pendulum.date(2026, 2, 18)

    @pytest.mark.parametrize("text", ["2026-02-30", "2026-13-01"])
    def test_impossible_date(self, text):
        with pytest.raises(typer.BadParameter):
            parse_date(text)

    @pytest.mark.parametrize("text", ["today", "t"])
    def test_today(self, text):
        assert parse_date(text) == pendulum.today("local").date()

    @pytest.mark.parametrize("text", ["tomorrow", "o"])
    def test_tomorrow(self, text):
        assert parse_date(text) == pendulum.tomorrow("local").date()

    @pytest.mark.parametrize("text", ["yesterday", "y"])
    def test_yesterday(self, text):
        assert parse_date(text) == pendulum.yesterday("local").date()

    def test_offset(self):
        assert parse_date("7") == pendulum.today("local").add(days=7).date()
        assert parse_date(-1) == pendulum.today("local").add(days=-1).date()

    @pytest.mark.parametrize("text", ["18/02/2026", "next week", ""])
    def test_unknown_format(self, text):
        with pytest.raises(typer.BadParameter):
            parse_date(text)


class TestParseMonth:
    def test_valid(self):
        assert parse_month("2026-03") == (2026, 3)
        assert parse_month("2026-3") == (2026, 3)

    @pytest.mark.parametrize("text", ["2026-00", "2026-13", "03-2026", "March"])
    def test_invalid(self, text):
        with pytest.raises(typer.BadParameter):
            parse_month(text)


class TestParseDateTimezone:
    # UTC+14 and UTC-12 are always on different calendar days
    @pytest.mark.parametrize("tz", ["Pacific/Kiritimati", "Etc/GMT+12"])
    def test_relative_dates_follow_configured_timezone(self, tz):
        view_state.set_timezone(tz)
        today = pendulum.today(tz).date()

        assert parse_date("today") == today
        assert parse_date("y") == today.subtract(days=1)
        assert parse_date("o") == today.add(days=1)
        assert parse_date("3") == today.add(days=3)

    def test_zones_far_apart_give_different_todays(self):
        view_state.set_timezone("Pacific/Kiritimati")
        east = parse_date("today")
        view_state.set_timezone("Etc/GMT+12")
        west = parse_date("today")

        assert east is not None and west is not None
        assert east.diff(west).in_days() in (1, 2)

    def test_iso_dates_ignore_timezone(self):
        view_state.set_timezone("Pacific/Kiritimati")
        assert parse_date("2026-02-18") == pendulum.date(2026, 2, 18)
