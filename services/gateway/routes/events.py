"""
Public event routes.

GET /api/events?year&month     month-scoped events (month 1-12)
GET /api/events/upcoming       next events from today
"""

from datetime import date

import structlog
from fastapi import APIRouter, Depends, Query

from community.src.adapters.event_store import EventRepository
from community.src.calendar.models import Event

from ..dependencies import get_event_repository

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", response_model=list[Event])
async def list_month_events(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12, description="1 = January"),
    repository: EventRepository = Depends(get_event_repository),
) -> list[Event]:
    """Events of one month, unordered (the calendar regroups them by day)."""
    events = repository.list_events_for_month(year, month)
    logger.debug("month_events_listed", year=year, month=month, count=len(events))
    return events


@router.get("/upcoming", response_model=list[Event])
async def list_upcoming_events(
    limit: int = Query(5, ge=1, le=50),
    repository: EventRepository = Depends(get_event_repository),
) -> list[Event]:
    """Events from today onwards, soonest first."""
    return repository.list_upcoming_events(date.today(), limit=limit)
