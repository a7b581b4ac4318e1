"""
Module Calendar - community center events calendar

Models, presentation rules, recurring seed generator, grid/list views and
the admin event editor.
"""

from community.src.calendar.models import CalendarDay, DayGroup, Event, EventInput, Room
from community.src.calendar.presentation import Category, category_style, format_time
from community.src.calendar.views import CalendarView
from community.src.calendar.editor import AdminEventEditor
from community.src.adapters.events_api import EventsApiClient

__all__ = [
    "AdminEventEditor",
    "CalendarDay",
    "CalendarView",
    "Category",
    "DayGroup",
    "Event",
    "EventInput",
    "EventsApiClient",
    "Room",
    "category_style",
    "format_time",
]
