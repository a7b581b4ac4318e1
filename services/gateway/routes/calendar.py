"""
Rendered calendar route.

GET /api/calendar?year&month&view=grid|list

Builds the 42-day grid or the per-day list server side from the month's
events, each event decorated with 12-hour times, room name and category
style. Computed on every request; nothing is cached across mutations.
"""

from datetime import date
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from community.src.adapters.event_store import EventRepository
from community.src.calendar.presentation import CATEGORY_LEGEND, DAYS_OF_WEEK, month_title
from community.src.calendar.views import build_month_grid, build_month_list, describe_event

from ..dependencies import get_event_repository
from ..schemas import (
    CalendarDayResponse,
    CalendarGridResponse,
    CalendarListResponse,
    DayGroupResponse,
    LegendEntry,
)

router = APIRouter(prefix="/api/calendar", tags=["calendar"])


@router.get("", response_model=CalendarGridResponse | CalendarListResponse)
async def render_calendar(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12, description="1 = January"),
    view: Literal["grid", "list"] = "grid",
    repository: EventRepository = Depends(get_event_repository),
) -> CalendarGridResponse | CalendarListResponse:
    events = repository.list_events_for_month(year, month)
    rooms = repository.rooms.as_mapping()
    legend = [LegendEntry(label=label, color=color) for label, color in CATEGORY_LEGEND]

    if view == "list":
        return CalendarListResponse(
            year=year,
            month=month,
            title=month_title(year, month),
            groups=[
                DayGroupResponse(
                    date=group.date,
                    label=group.label,
                    events=[describe_event(e, rooms) for e in group.events],
                )
                for group in build_month_list(events)
            ],
            legend=legend,
        )

    try:
        grid = build_month_grid(year, month, events, today=date.today())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    days = [
        CalendarDayResponse(
            date=day.date,
            in_current_month=day.in_current_month,
            is_today=day.is_today,
            is_weekend=day.is_weekend,
            events=[describe_event(e, rooms) for e in day.events],
            visible_events=[describe_event(e, rooms) for e in day.visible_events],
            overflow_count=day.overflow_count,
            overflow_label=day.overflow_label,
        )
        for day in grid
    ]
    return CalendarGridResponse(
        year=year,
        month=month,
        title=month_title(year, month),
        days_of_week=list(DAYS_OF_WEEK),
        days=days,
        legend=legend,
    )
