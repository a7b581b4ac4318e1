"""
Calendar presentation rules - category styles and time/date labels.

Pure functions, no side effects. Category is free text in storage; unknown
values degrade to the OTHER style instead of raising.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Mapping

from community.src.calendar.models import Room

DAYS_OF_WEEK: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
UNKNOWN_ROOM_LABEL = "TBA"


class Category(str, Enum):
    """Known event categories, OTHER for anything unrecognized."""

    CLASSES = "Classes"
    ACTIVITIES = "Activities"
    MEETINGS = "Meetings"
    COMMUNITY_EVENTS = "Community Events"
    ENTERTAINMENT = "Entertainment"
    OTHER = "Other"

    @classmethod
    def from_value(cls, value: str | None) -> Category:
        for member in cls:
            if member is not cls.OTHER and member.value == value:
                return member
        return cls.OTHER


@dataclass(frozen=True)
class CategoryStyle:
    """Tailwind classes for an event chip."""

    background: str
    text: str
    border: str

    @property
    def css_class(self) -> str:
        return f"{self.background} {self.text} {self.border}"


def _style(color: str) -> CategoryStyle:
    return CategoryStyle(
        background=f"bg-gradient-to-r from-{color}-100 to-{color}-50",
        text=f"text-{color}-800",
        border=f"border-l-4 border-{color}-500",
    )


# Mapping category -> style
CATEGORY_STYLES: dict[Category, CategoryStyle] = {
    Category.CLASSES: _style("blue"),
    Category.ACTIVITIES: _style("green"),
    Category.MEETINGS: _style("red"),
    Category.COMMUNITY_EVENTS: _style("purple"),
    Category.ENTERTAINMENT: _style("amber"),
    Category.OTHER: _style("gray"),
}

# Legend shown under the calendar, (label, dot color)
CATEGORY_LEGEND: tuple[tuple[str, str], ...] = (
    (Category.CLASSES.value, "blue"),
    (Category.ACTIVITIES.value, "green"),
    (Category.MEETINGS.value, "red"),
    (Category.COMMUNITY_EVENTS.value, "purple"),
    (Category.ENTERTAINMENT.value, "amber"),
)


def category_style(category: str | None) -> CategoryStyle:
    """Return the style bucket for a category, gray default if unknown."""
    return CATEGORY_STYLES[Category.from_value(category)]


def format_time(value: str | None) -> str:
    """Format a stored 24-hour time as 12-hour with AM/PM.

    Args:
        value: Stored time, "HH:MM" or "HH:MM:SS"

    Returns:
        "" for empty input, the input unchanged if the hour is not numeric
        (ex: "13:30" -> "1:30 PM", "00:00" -> "12:00 AM")
    """
    if not value:
        return ""

    parts = value.split(":")
    try:
        hours = int(parts[0])
    except ValueError:
        return value
    minutes = parts[1] if len(parts) > 1 else "00"

    period = "PM" if hours >= 12 else "AM"
    hours12 = hours % 12 or 12
    return f"{hours12}:{minutes} {period}"


def format_time_range(start: str | None, end: str | None) -> str:
    return f"{format_time(start)} - {format_time(end)}"


def month_title(year: int, month: int) -> str:
    """Calendar header, ex: "May 2025"."""
    return f"{calendar.month_name[month]} {year}"


def day_label(day: date) -> str:
    """List-mode group header, ex: "Saturday, May 10"."""
    return f"{calendar.day_name[day.weekday()]}, {calendar.month_abbr[day.month]} {day.day}"


def long_date_label(day: date) -> str:
    """Show-more dialog title, ex: "May 10, 2025"."""
    return f"{calendar.month_name[day.month]} {day.day}, {day.year}"


def room_label(room_id: int, rooms: Mapping[int, Room] | Iterable[Room]) -> str:
    """Resolve a room id to its display name, "TBA" if unknown."""
    if not isinstance(rooms, Mapping):
        rooms = {room.id: room for room in rooms}
    room = rooms.get(room_id)
    return room.name if room is not None else UNKNOWN_ROOM_LABEL
