"""
Calendar Grid/List View Builder.

Grid mode: 42 cells (6 weeks x 7 days) starting on the Sunday on/before the
1st of the month, each with its bucket of events. List mode: events grouped
by day, ascending, untruncated.

Bucketing always compares local (year, month, day) components decomposed from
the stored "YYYY-MM-DD" string, never UTC timestamps or raw strings.

CalendarView is the stateful view model behind the public events page and the
admin editor: displayed month, mode, selection, overflow dialog and the
refetch rules (mount, month change, successful mutation, manual refresh).
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, Iterable, Literal, Mapping, Sequence

import structlog
from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from community.src.calendar.models import CalendarDay, DayGroup, Event, Room
from community.src.calendar.presentation import (
    CategoryStyle,
    category_style,
    day_label,
    format_time,
    format_time_range,
    long_date_label,
    month_title,
    room_label,
)
from config.exceptions import TransientFetchError

logger = structlog.get_logger(__name__)

GRID_DAYS = 42  # 6 rows * 7 days
DEFAULT_FRESHNESS_SECONDS = 10.0

ViewMode = Literal["calendar", "list"]
FetchEvents = Callable[[int, int], Sequence[Event]]


# ============================================================================
# Pure builders
# ============================================================================


def grid_dates(year: int, month: int) -> list[date]:
    """
    42 consecutive dates, first one a Sunday on/before the 1st.

    Raises:
        ValueError: if the month is invalid or the grid leaves the supported
                    date range (January of year 1, December of year 9999)
    """
    first = date(year, month, 1)
    try:
        start = first - timedelta(days=first.isoweekday() % 7)
        return [start + timedelta(days=i) for i in range(GRID_DAYS)]
    except OverflowError as exc:
        raise ValueError(f"Month grid for {year}-{month:02d} is out of the supported date range") from exc


def bucket_events(events: Iterable[Event]) -> dict[date, list[Event]]:
    """Group events by local calendar day, keeping their order."""
    buckets: dict[date, list[Event]] = {}
    for event in events:
        buckets.setdefault(event.local_date(), []).append(event)
    return buckets


def events_for_day(events: Iterable[Event], day: date) -> list[Event]:
    return [
        event
        for event in events
        if (event.local_date().year, event.local_date().month, event.local_date().day)
        == (day.year, day.month, day.day)
    ]


def build_month_grid(
    year: int,
    month: int,
    events: Iterable[Event],
    today: date | None = None,
) -> list[CalendarDay]:
    """
    Build the 6-week grid for a month.

    Leading/trailing days from adjacent months are included and still get
    their events; in_current_month only affects styling.
    """
    today = today or date.today()
    buckets = bucket_events(events)
    return [
        CalendarDay(
            date=day,
            in_current_month=day.month == month,
            is_today=day == today,
            events=buckets.get(day, []),
        )
        for day in grid_dates(year, month)
    ]


def build_month_list(events: Iterable[Event]) -> list[DayGroup]:
    """Group events by day, days ascending, every event kept."""
    buckets = bucket_events(events)
    return [
        DayGroup(date=day, label=day_label(day), events=day_events)
        for day, day_events in sorted(buckets.items())
    ]


# ============================================================================
# Read-only detail + interaction intents
# ============================================================================


class EventDetail(BaseModel):
    """Event decorated for display (times, room name, category style)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    description: str
    date: str
    start_time: str
    end_time: str
    display_start: str
    display_end: str
    time_range: str
    room_id: int
    room_name: str
    category: str
    style: CategoryStyle


def describe_event(event: Event, rooms: Mapping[int, Room] | Iterable[Room] = ()) -> EventDetail:
    return EventDetail(
        id=event.id,
        title=event.title,
        description=event.description,
        date=event.date,
        start_time=event.start_time,
        end_time=event.end_time,
        display_start=format_time(event.start_time),
        display_end=format_time(event.end_time),
        time_range=format_time_range(event.start_time, event.end_time),
        room_id=event.room_id,
        room_name=room_label(event.room_id, rooms),
        category=event.category,
        style=category_style(event.category),
    )


@dataclass(frozen=True)
class AddEventIntent:
    """Admin clicked a day cell: open the create form on that date."""

    date: date


@dataclass(frozen=True)
class EditEventIntent:
    """Admin clicked an event: open the edit form, no navigation."""

    event: Event


@dataclass(frozen=True)
class OverflowList:
    """Full per-day list opened from a "+N more" indicator."""

    date: date
    title: str
    events: list[Event] = field(default_factory=list)


# ============================================================================
# Stateful view model
# ============================================================================


class CalendarView:
    """
    Month calendar view model.

    Args:
        fetch_events: Callable(year, month) returning the month's events.
                      May raise TransientFetchError.
        rooms: Room lookup for detail display
        admin: Admin mode enables add/edit intents
        year, month: Initially displayed month (default: current month)
        freshness_seconds: Age after which ensure_fresh() refetches
        clock: Monotonic clock, injectable for tests
        today: Date provider for the "today" highlight
    """

    def __init__(
        self,
        fetch_events: FetchEvents,
        *,
        rooms: Mapping[int, Room] | Iterable[Room] = (),
        admin: bool = False,
        year: int | None = None,
        month: int | None = None,
        freshness_seconds: float = DEFAULT_FRESHNESS_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        today: Callable[[], date] = date.today,
    ) -> None:
        current = today()
        self._fetch_events = fetch_events
        self.rooms: dict[int, Room] = (
            dict(rooms) if isinstance(rooms, Mapping) else {room.id: room for room in rooms}
        )
        self.admin = admin
        self.year = year if year is not None else current.year
        self.month = month if month is not None else current.month
        self.freshness_seconds = freshness_seconds
        self._clock = clock
        self._today = today

        self.mode: ViewMode = "calendar"
        self.events: list[Event] = []
        self.error: str | None = None
        self.selected_event: Event | None = None
        self.overflow: OverflowList | None = None
        self.fetch_count = 0
        self._fetched_at: float | None = None

    # ---------- Data fetching ----------

    def _fetch(self) -> None:
        self.fetch_count += 1
        try:
            events = list(self._fetch_events(self.year, self.month))
        except TransientFetchError as exc:
            # Keep whatever was displayed; the banner offers a manual retry
            self.error = str(exc) or "Failed to load events"
            logger.warning("calendar_fetch_failed", year=self.year, month=self.month, error=str(exc))
            return
        self.events = events
        self.error = None
        self._fetched_at = self._clock()
        logger.debug("calendar_fetched", year=self.year, month=self.month, events=len(events))

    @property
    def is_stale(self) -> bool:
        if self._fetched_at is None:
            return True
        return self._clock() - self._fetched_at >= self.freshness_seconds

    def mount(self) -> None:
        """Always refetch when the view is (re)mounted."""
        self._fetch()

    def refresh(self) -> None:
        """Manual refresh (also the retry action of the error banner)."""
        self._fetch()

    def notify_mutation(self) -> None:
        """Invalidate after a successful create/update/delete."""
        self._fetched_at = None
        self._fetch()

    def ensure_fresh(self) -> bool:
        """Refetch only if the data is older than the freshness window."""
        if not self.is_stale:
            return False
        self._fetch()
        return True

    # ---------- Navigation ----------

    def go_to(self, year: int, month: int) -> None:
        if not 1 <= month <= 12:
            raise ValueError(f"month must be 1-12, got {month}")
        self.year, self.month = year, month
        self.events = []
        self.close_dialogs()
        self._fetch()

    def _shift_month(self, months: int) -> None:
        target = date(self.year, self.month, 1) + relativedelta(months=months)
        self.go_to(target.year, target.month)

    def next_month(self) -> None:
        self._shift_month(1)

    def prev_month(self) -> None:
        self._shift_month(-1)

    def set_mode(self, mode: ViewMode) -> None:
        if mode not in ("calendar", "list"):
            raise ValueError(f"Unknown calendar mode: {mode}")
        self.mode = mode

    # ---------- Rendering ----------

    @property
    def title(self) -> str:
        return month_title(self.year, self.month)

    def grid(self) -> list[CalendarDay]:
        return build_month_grid(self.year, self.month, self.events, today=self._today())

    def groups(self) -> list[DayGroup]:
        return build_month_list(self.events)

    # ---------- Interaction ----------

    def click_day(self, day: date) -> AddEventIntent | None:
        """Admin: add an event on this day. Public: nothing happens."""
        if not self.admin:
            return None
        return AddEventIntent(date=day)

    def click_event(self, event: Event) -> EditEventIntent | EventDetail:
        """
        Admin: edit intent. Public: select the event and return its
        read-only detail. Never mutates the store.
        """
        if self.admin:
            return EditEventIntent(event=event)
        self.selected_event = event
        return describe_event(event, self.rooms)

    def show_more(self, day: date) -> OverflowList:
        overflow = OverflowList(
            date=day,
            title=f"All Events - {long_date_label(day)}",
            events=events_for_day(self.events, day),
        )
        self.overflow = overflow
        return overflow

    def close_dialogs(self) -> None:
        self.selected_event = None
        self.overflow = None
