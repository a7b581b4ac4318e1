"""
Recurring Event Generator - one year of community center events.

Recurring rules:
- every Friday: Borderline Band Dance (Gymnasium) + New Sounds Karaoke
  (Community Room)
- second Thursday of each month: Alnwick Board Meeting (Community Room)
then the one-off annual events from the seed config.

Weekday indexes are Sunday=0 .. Saturday=6. The first occurrence of a
weekday in a month is found with one modular formula, never by scanning.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

import structlog

from community.src.adapters.event_store import EventRepository
from community.src.calendar.models import EventInput
from community.src.calendar.seed_config import AnnualEventTemplate, SeedConfig

logger = structlog.get_logger(__name__)

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)

DEFAULT_SEED_YEAR = 2025


@dataclass(frozen=True)
class RecurringEventTemplate:
    """Fields shared by every occurrence of a recurring event."""

    title: str
    description: str
    start_time: str
    end_time: str
    room_id: int
    category: str

    def on(self, day: date) -> EventInput:
        return EventInput(
            title=self.title,
            description=self.description,
            date=day.isoformat(),
            start_time=self.start_time,
            end_time=self.end_time,
            room_id=self.room_id,
            category=self.category,
        )


BOARD_MEETING = RecurringEventTemplate(
    title="Alnwick Board Meeting",
    description=(
        "Monthly board meeting for the Alnwick Community Center in the Community Room. "
        "Community members are welcome to attend."
    ),
    start_time="17:00",
    end_time="18:00",
    room_id=2,
    category="Meetings",
)

FRIDAY_DANCE = RecurringEventTemplate(
    title="Borderline Band Dance",
    description=(
        "Join us for live music and dancing with the Borderline Band in our Gymnasium. "
        "All ages welcome."
    ),
    start_time="18:00",
    end_time="22:00",
    room_id=1,
    category="Activities",
)

FRIDAY_KARAOKE = RecurringEventTemplate(
    title="New Sounds Karaoke",
    description=(
        "Enjoy an evening of karaoke with New Sounds in the Community Room. "
        "Sing your favorite songs in a fun, supportive environment."
    ),
    start_time="19:00",
    end_time="22:00",
    room_id=2,
    category="Activities",
)


# ============================================================================
# Calendar math
# ============================================================================


def sunday_based_weekday(day: date) -> int:
    """Weekday index with Sunday=0 .. Saturday=6."""
    return day.isoweekday() % 7


def first_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """
    First occurrence of a weekday (Sunday=0) in a month.

    offset = (weekday - weekday_of_the_1st) mod 7, which is 0 when the 1st is
    already that weekday and wraps to the next week when the 1st is past it.
    """
    first = date(year, month, 1)
    offset = (weekday - sunday_based_weekday(first)) % 7
    return first + timedelta(days=offset)


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """n-th occurrence (1-based). n <= 4 always stays within the month."""
    if not 1 <= n <= 5:
        raise ValueError(f"n must be 1-5, got {n}")
    day = first_weekday_of_month(year, month, weekday) + timedelta(weeks=n - 1)
    if day.month != month:
        raise ValueError(f"No occurrence #{n} of weekday {weekday} in {year}-{month:02d}")
    return day


def weekdays_in_month(year: int, month: int, weekday: int) -> list[date]:
    """Every occurrence of a weekday in a month, stepping +7 days."""
    days = []
    current = first_weekday_of_month(year, month, weekday)
    while current.month == month:
        days.append(current)
        current += timedelta(days=7)
    return days


# ============================================================================
# Generation
# ============================================================================


def generate_recurring_events(
    year: int, annual_events: Iterable[AnnualEventTemplate] = ()
) -> list[EventInput]:
    """
    Build the full-year event list, in emission order.

    Per month: the board meeting, then the dance + karaoke pair for each
    Friday. Annual one-off events come last.
    """
    events: list[EventInput] = []

    for month in range(1, 13):
        events.append(BOARD_MEETING.on(nth_weekday_of_month(year, month, THURSDAY, 2)))

        for friday in weekdays_in_month(year, month, FRIDAY):
            events.append(FRIDAY_DANCE.on(friday))
            events.append(FRIDAY_KARAOKE.on(friday))

    for template in annual_events:
        events.append(
            EventInput(
                title=template.title,
                description=template.description,
                date=template.date_for(year),
                start_time=template.start_time,
                end_time=template.end_time,
                room_id=template.room_id,
                category=template.category,
            )
        )

    return events


def seed_events(
    repository: EventRepository,
    year: int = DEFAULT_SEED_YEAR,
    config: SeedConfig | None = None,
) -> int:
    """
    Insert the generated year into the repository. Idempotent.

    Events whose (title, date, start time, room) already exist are skipped,
    so a second call adds nothing.

    Returns:
        Number of events created
    """
    annual = config.annual_events if config is not None else ()
    created = 0
    skipped = 0

    for data in generate_recurring_events(year, annual):
        if repository.find_duplicate(data) is not None:
            skipped += 1
            continue
        repository.create_event(data)
        created += 1

    logger.info("seed_completed", year=year, created=created, skipped=skipped)
    return created
