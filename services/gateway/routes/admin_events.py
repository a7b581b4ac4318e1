"""
Admin event routes - CRUD over the Event Store.

All routes require role "admin" (401 without a valid token, 403 otherwise).
Validation and not-found errors raised by the repository are turned into
400/404 by the handlers registered in main.create_app().
"""

from typing import Any, Dict

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException, status

from community.src.adapters.event_store import EventRepository
from community.src.calendar.models import Event

from ..auth import require_admin
from ..dependencies import get_event_repository
from ..schemas import ErrorResponse, MessageResponse

logger = structlog.get_logger(__name__)
router = APIRouter(
    prefix="/api/admin/events",
    tags=["admin-events"],
    dependencies=[Depends(require_admin)],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)

EVENT_BODY_EXAMPLE = {
    "title": "Test Event",
    "description": "Event description",
    "date": "2025-05-10",
    "startTime": "10:00",
    "endTime": "11:00",
    "roomId": 2,
    "category": "Classes",
}


@router.get("", response_model=list[Event])
async def list_all_events(
    repository: EventRepository = Depends(get_event_repository),
) -> list[Event]:
    return repository.list_events()


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: Dict[str, Any] = Body(..., examples=[EVENT_BODY_EXAMPLE]),
    repository: EventRepository = Depends(get_event_repository),
) -> Event:
    return repository.create_event(payload)


@router.get("/{event_id}", response_model=Event)
async def get_event(
    event_id: int,
    repository: EventRepository = Depends(get_event_repository),
) -> Event:
    return repository.get_event(event_id)


@router.put("/{event_id}", response_model=Event)
async def update_event(
    event_id: int,
    payload: Dict[str, Any] = Body(..., examples=[EVENT_BODY_EXAMPLE]),
    repository: EventRepository = Depends(get_event_repository),
) -> Event:
    """Full replacement; an id in the body is ignored."""
    return repository.update_event(event_id, payload)


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: int,
    repository: EventRepository = Depends(get_event_repository),
) -> MessageResponse:
    if not repository.delete_event(event_id):
        logger.warning("admin_event_delete_not_found", event_id=event_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return MessageResponse(message="Event deleted successfully")
