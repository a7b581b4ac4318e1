"""
Unit tests for the calendar models.

Tests:
- parse_event_date decomposes YYYY-MM-DD without timezone shifts
- EventInput rejects blank/malformed fields, accepts camelCase and snake_case
- CalendarDay overflow ("+N more") and weekend flags
"""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from community.src.calendar.models import (
    MAX_INLINE_EVENTS,
    CalendarDay,
    Event,
    EventInput,
    parse_event_date,
)


class TestParseEventDate:
    """Tests for parse_event_date."""

    def test_parses_components(self):
        assert parse_event_date("2025-05-10") == date(2025, 5, 10)

    def test_strips_whitespace(self):
        assert parse_event_date(" 2025-12-31 ") == date(2025, 12, 31)

    @pytest.mark.parametrize("value", ["2025/05/10", "10-05-2025", "2025-5-10", "", "not a date"])
    def test_rejects_malformed(self, value):
        with pytest.raises(ValueError):
            parse_event_date(value)

    def test_rejects_impossible_day(self):
        with pytest.raises(ValueError):
            parse_event_date("2025-02-30")


class TestEventInput:
    """Tests for the create/update payload model."""

    def test_accepts_wire_field_names(self, event_payload):
        data = EventInput.model_validate(event_payload)
        assert data.start_time == "10:00"
        assert data.room_id == 2

    def test_accepts_python_field_names(self):
        data = EventInput(
            title="Yoga",
            description="Morning yoga",
            date="2025-05-10",
            start_time="09:00",
            end_time="10:00:00",
            room_id=3,
            category="Classes",
        )
        assert data.end_time == "10:00:00"

    def test_ignores_unknown_fields(self, event_payload):
        event_payload["id"] = 999
        data = EventInput.model_validate(event_payload)
        assert "id" not in data.model_dump()

    @pytest.mark.parametrize("field", ["title", "description", "category"])
    def test_blank_text_rejected(self, event_payload, field):
        event_payload[field] = "   "
        with pytest.raises(ValidationError, match="must not be blank"):
            EventInput.model_validate(event_payload)

    @pytest.mark.parametrize("value", ["25:00", "9am", "10:60", ""])
    def test_malformed_time_rejected(self, event_payload, value):
        event_payload["startTime"] = value
        with pytest.raises(ValidationError):
            EventInput.model_validate(event_payload)

    def test_room_id_must_be_positive(self, event_payload):
        event_payload["roomId"] = 0
        with pytest.raises(ValidationError):
            EventInput.model_validate(event_payload)

    def test_end_before_start_is_accepted(self, event_payload):
        event_payload["startTime"] = "15:00"
        event_payload["endTime"] = "09:00"
        data = EventInput.model_validate(event_payload)
        assert data.end_time == "09:00"


class TestEvent:
    """Tests for the stored Event record."""

    def test_from_input_keeps_fields(self, event_payload):
        event = Event.from_input(7, EventInput.model_validate(event_payload))
        assert event.id == 7
        assert event.title == "Test Event"
        assert event.local_date() == date(2025, 5, 10)

    def test_serializes_camel_case(self, make_event):
        payload = make_event("2025-05-10").model_dump(by_alias=True)
        assert {"startTime", "endTime", "roomId"} <= set(payload)

    def test_is_frozen(self, make_event):
        event = make_event("2025-05-10")
        with pytest.raises(ValidationError):
            event.title = "Changed"


class TestCalendarDay:
    """Tests for grid cell overflow and weekend flags."""

    def test_no_overflow_up_to_limit(self, make_event):
        events = [make_event("2025-05-10") for _ in range(MAX_INLINE_EVENTS)]
        day = CalendarDay(date=date(2025, 5, 10), in_current_month=True, events=events)
        assert day.visible_events == events
        assert day.overflow_count == 0
        assert day.overflow_label is None

    def test_overflow_label(self, make_event):
        events = [make_event("2025-05-10", title=f"E{i}") for i in range(5)]
        day = CalendarDay(date=date(2025, 5, 10), in_current_month=True, events=events)
        assert [e.title for e in day.visible_events] == ["E0", "E1"]
        assert day.overflow_count == 3
        assert day.overflow_label == "+3 more"

    def test_weekend_flag(self):
        assert CalendarDay(date=date(2025, 5, 10), in_current_month=True).is_weekend
        assert CalendarDay(date=date(2025, 5, 11), in_current_month=True).is_weekend
        assert not CalendarDay(date=date(2025, 5, 12), in_current_month=True).is_weekend
