"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timedelta
from uuid import UUID

import pytest

from events.domain import Attendee, AttendeeId, Category, Event, EventId, EventStatus
from events.domain.errors import InvalidCategoryError, InvalidDateTimeError
from events.domain.value_objects import format_start_time, parse_start_time

NOW = datetime(2026, 10, 19, 12, 0)


def make_event(start_time: datetime, name: str = "Show") -> Event:
    return Event(
        name=name,
        address="Main St 1",
        category=Category.SHOW,
        start_time=start_time,
        description="",
    )


class TestCategory:
    """Tests for Category parsing."""

    def test_parse_is_case_insensitive(self):
        """Category.parse accepts any letter case."""
        assert Category.parse("party") is Category.PARTY
        assert Category.parse("Cultural") is Category.CULTURAL

    def test_parse_ignores_surrounding_whitespace(self):
        """Category.parse strips the input."""
        assert Category.parse("  sports \n") is Category.SPORTS

    def test_parse_rejects_unknown_name(self):
        """Category.parse raises InvalidCategoryError for unknown names."""
        with pytest.raises(InvalidCategoryError) as exc_info:
            Category.parse("concert")
        assert exc_info.value.value == "concert"
        assert str(exc_info.value).startswith("INVALID_CATEGORY:")

    def test_names_lists_every_category(self):
        """Category.names returns the member names in declaration order."""
        assert Category.names() == ["PARTY", "SHOW", "SPORTS", "CULTURAL", "OTHER"]


class TestIdentifiers:
    """Tests for EventId and AttendeeId value objects."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = "12345678-1234-5678-1234-567812345678"
        assert EventId.from_string(raw).value == UUID(raw)

    def test_from_string_invalid_uuid(self):
        """AttendeeId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            AttendeeId.from_string("not-a-uuid")

    def test_new_ids_are_distinct(self):
        """Each new() call yields a fresh identifier."""
        assert EventId.new() != EventId.new()


class TestStartTime:
    """Tests for the dd/MM/yyyy HH:mm boundary format."""

    def test_parse_start_time(self):
        """parse_start_time reads day first."""
        assert parse_start_time("05/03/2026 21:30") == datetime(2026, 3, 5, 21, 30)

    def test_parse_start_time_rejects_other_formats(self):
        """parse_start_time raises InvalidDateTimeError for ISO input."""
        with pytest.raises(InvalidDateTimeError):
            parse_start_time("2026-03-05 21:30")

    def test_format_start_time(self):
        """format_start_time pads day and month."""
        assert format_start_time(datetime(2026, 3, 5, 9, 5)) == "05/03/2026 09:05"


class TestEventStatus:
    """Tests for Event.status classification."""

    def test_started_an_hour_ago_is_ongoing(self):
        assert make_event(NOW - timedelta(hours=1)).status(NOW) is EventStatus.ONGOING

    def test_started_three_hours_ago_is_past(self):
        assert make_event(NOW - timedelta(hours=3)).status(NOW) is EventStatus.PAST

    def test_starting_in_an_hour_is_upcoming(self):
        assert make_event(NOW + timedelta(hours=1)).status(NOW) is EventStatus.UPCOMING

    def test_window_boundaries(self):
        """The window includes its start and excludes its end."""
        assert make_event(NOW).status(NOW) is EventStatus.ONGOING
        assert make_event(NOW - timedelta(hours=2)).status(NOW) is EventStatus.PAST


class TestIdentity:
    """Tests for id-based equality of events and attendees."""

    def test_editing_an_event_keeps_it_equal_to_itself(self):
        event = make_event(NOW)
        holder = [event]
        event.name = "Renamed"
        assert event in holder

    def test_identical_fields_are_different_events(self):
        """Two events built from the same values are not the same event."""
        assert make_event(NOW) != make_event(NOW)

    def test_attendee_equality_follows_id(self):
        first = Attendee(name="Ana", email="ana@example.com", city="Recife")
        copy = Attendee(name="Other", email="x@example.com", city="", id=first.id)
        assert first == copy
        assert hash(first) == hash(copy)
