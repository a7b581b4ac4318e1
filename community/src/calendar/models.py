"""
Pydantic models for the community center calendar.

Event and Room are the stored records; EventInput is the validated payload
for create/update; CalendarDay and DayGroup are derived per render and never
persisted.
"""

from __future__ import annotations

import datetime
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

# Grid cells show at most this many events before "+N more"
MAX_INLINE_EVENTS = 2

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$")


def parse_event_date(value: str) -> datetime.date:
    """
    Decompose a "YYYY-MM-DD" string into a local calendar date.

    The string is split into (year, month, day) components and rebuilt as a
    naive date, so the day number never shifts with the host timezone.

    Raises:
        ValueError: if the string is not a valid calendar date
    """
    if not isinstance(value, str) or not _DATE_RE.match(value.strip()):
        raise ValueError(f"date must be YYYY-MM-DD, got {value!r}")
    year, month, day = (int(part) for part in value.strip().split("-"))
    return datetime.date(year, month, day)


class _CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Room(_CamelModel):
    """Bookable space referenced by events through its id."""

    id: int
    name: str
    description: str = ""
    capacity: int = Field(default=0, ge=0)
    features: list[str] = Field(default_factory=list)


class EventInput(_CamelModel):
    """
    Event fields accepted on create and full-replacement update.

    Room existence is checked by the repository, which owns the room
    directory. start_time < end_time is not checked.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    title: str
    description: str
    date: str
    start_time: str
    end_time: str
    room_id: int = Field(..., ge=1)
    category: str

    @field_validator("room_id", mode="before")
    @classmethod
    def room_id_not_bool(cls, v: Any) -> Any:
        # bool is an int subclass: true would become room 1
        if isinstance(v, bool):
            raise ValueError("room id must be an integer")
        return v

    @field_validator("title", "description", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("date")
    @classmethod
    def valid_date(cls, v: str) -> str:
        parse_event_date(v)
        return v.strip()

    @field_validator("start_time", "end_time")
    @classmethod
    def valid_time(cls, v: str) -> str:
        if not _TIME_RE.match(v.strip()):
            raise ValueError("time must be HH:MM (24-hour)")
        return v.strip()


class Event(_CamelModel):
    """Stored event record. Updated only by full replacement."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    title: str
    description: str
    date: str
    start_time: str
    end_time: str
    room_id: int
    category: str

    @classmethod
    def from_input(cls, event_id: int, data: EventInput) -> Event:
        return cls(id=event_id, **data.model_dump())

    def local_date(self) -> datetime.date:
        return parse_event_date(self.date)

    def natural_key(self) -> tuple[str, str, str, int]:
        return (self.title, self.date, self.start_time, self.room_id)


class CalendarDay(BaseModel):
    """One cell of the month grid with its event bucket."""

    date: datetime.date
    in_current_month: bool
    is_today: bool = False
    events: list[Event] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_weekend(self) -> bool:
        return self.date.isoweekday() in (6, 7)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def visible_events(self) -> list[Event]:
        return self.events[:MAX_INLINE_EVENTS]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overflow_count(self) -> int:
        return max(len(self.events) - MAX_INLINE_EVENTS, 0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overflow_label(self) -> str | None:
        if self.overflow_count == 0:
            return None
        return f"+{self.overflow_count} more"


class DayGroup(BaseModel):
    """List-mode group: every event of one day, untruncated."""

    date: datetime.date
    label: str
    events: list[Event] = Field(default_factory=list)
