"""Tests for the holiday calendar."""

import logging
from datetime import date, datetime

import pytest

from recurtask.core.holidays import Holiday, HolidayCalendar


@pytest.fixture
def records():
    return [
        {"name": "Culture Day", "holiday": "2025-11-03", "holiday_note": "national"},
        {"name": "Labour Thanksgiving Day", "holiday": "2025-11-24", "holiday_note": "substitute"},
    ]


class TestHoliday:
    def test_from_record(self):
        h = Holiday.from_record({"name": "Culture Day", "holiday": "2025-11-03", "holiday_note": "x"})
        assert h == Holiday(name="Culture Day", date=date(2025, 11, 3), note="x")

    def test_from_record_accepts_date_and_note_aliases(self):
        h = Holiday.from_record({"name": "Day", "date": "2025-11-03", "note": "y"})
        assert h.date == date(2025, 11, 3)
        assert h.note == "y"

    def test_from_record_native_toml_date(self):
        h = Holiday.from_record({"name": "Day", "holiday": date(2025, 11, 3)})
        assert h.date == date(2025, 11, 3)
        assert h.note == ""

    def test_from_record_datetime_truncated_to_date(self):
        h = Holiday.from_record({"name": "Day", "holiday": datetime(2025, 11, 3, 10, 0)})
        assert h.date == date(2025, 11, 3)
        assert type(h.date) is date

    def test_from_record_invalid_date(self):
        with pytest.raises(ValueError):
            Holiday.from_record({"name": "Bad", "holiday": "2025-13-01"})

    def test_from_record_missing_date(self):
        with pytest.raises(ValueError):
            Holiday.from_record({"name": "No date"})

    def test_to_record_round_trip(self, records):
        for record in records:
            assert Holiday.from_record(record).to_record() == record


class TestHolidayCalendar:
    def test_is_holiday(self, records):
        cal = HolidayCalendar.from_records(records)
        assert cal.is_holiday(date(2025, 11, 3)) is True
        assert cal.is_holiday(date(2025, 11, 4)) is False

    def test_empty_calendar(self):
        cal = HolidayCalendar()
        assert cal.is_holiday(date(2025, 1, 1)) is False
        assert len(cal) == 0

    def test_duplicate_dates_are_idempotent(self):
        cal = HolidayCalendar.from_records([
            {"name": "First", "holiday": "2025-11-03"},
            {"name": "Second", "holiday": "2025-11-03"},
        ])
        assert len(cal) == 1
        assert cal.is_holiday(date(2025, 11, 3))
        assert cal.get(date(2025, 11, 3)).name == "Second"

    def test_malformed_entries_are_not_holidays(self, caplog):
        with caplog.at_level(logging.WARNING):
            cal = HolidayCalendar.from_records([
                {"name": "Good", "holiday": "2025-11-03"},
                {"name": "Bad", "holiday": "not-a-date"},
            ])
        assert len(cal) == 1
        assert "not-a-date" in caplog.text

    def test_between(self, records):
        cal = HolidayCalendar.from_records(records + [{"name": "New Year", "holiday": "2026-01-01"}])
        names = [h.name for h in cal.between(date(2025, 11, 1), date(2025, 11, 30))]
        assert names == ["Culture Day", "Labour Thanksgiving Day"]

    def test_between_is_inclusive(self, records):
        cal = HolidayCalendar.from_records(records)
        assert len(cal.between(date(2025, 11, 3), date(2025, 11, 24))) == 2

    def test_contains(self, records):
        cal = HolidayCalendar.from_records(records)
        assert date(2025, 11, 24) in cal

    def test_is_immutable(self, records):
        cal = HolidayCalendar.from_records(records)
        with pytest.raises(AttributeError):
            cal.holidays = ()
