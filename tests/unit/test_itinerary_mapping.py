"""Generated itinerary -> saved record conversion."""

from __future__ import annotations

import datetime as dt

from tripgen.persistence.mapping import to_saved_record


def test_saved_record_flattens_days_and_derives_metadata(generator):
    itinerary = generator.generate_itinerary("accra", "History", "3")

    record = to_saved_record(itinerary, "user-1", today=dt.date(2026, 12, 30))

    assert record.id == ""
    assert record.user_id == "user-1"
    assert record.title == "Accra Trip"
    assert record.destination == "Accra"
    assert record.start_date == dt.date(2026, 12, 30)
    assert record.end_date == dt.date(2027, 1, 1)
    assert record.total_days == 3
    assert record.preferences.interests == "History"
    assert record.preferences.duration == "3 days"
    assert record.tags == ["history"]
    assert record.is_public is False
    assert record.likes == 0
    assert len(record.days) == 3
    for saved_day, day in zip(record.days, itinerary.days):
        assert saved_day.date == day.date
        assert saved_day.total_duration == day.total_duration
        assert [a.id for a in saved_day.activities] == [a.id for a in day.activities]
        assert [a.time_slot for a in saved_day.activities] == [a.time_slot for a in day.activities]


def test_blank_interest_produces_no_tags(generator):
    itinerary = generator.generate_itinerary("kumasi", "", "1")

    record = to_saved_record(itinerary, "user-1", is_public=True)

    assert record.tags == []
    assert record.is_public is True
    assert record.start_date == record.end_date
