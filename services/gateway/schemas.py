"""
Alnwick Community Center - Gateway Pydantic schemas.

API response models for health, auth and calendar rendering endpoints.
Event and Room themselves are served with their domain models.
"""

from __future__ import annotations

import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from community.src.calendar.views import EventDetail

SystemStatusType = Literal["healthy", "degraded"]


class _CamelSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(_CamelSchema):
    """Response model for GET /api/health."""

    status: SystemStatusType
    timestamp: str
    events: int
    rooms: int


class AuthUser(BaseModel):
    """Authenticated user info."""

    username: str
    role: str


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    errors: dict[str, str] | None = None


class MessageResponse(BaseModel):
    """Confirmation message (ex: delete)."""

    message: str


class LegendEntry(_CamelSchema):
    label: str
    color: str


class CalendarDayResponse(_CamelSchema):
    """One grid cell, events decorated for display."""

    date: datetime.date
    in_current_month: bool
    is_today: bool
    is_weekend: bool
    events: list[EventDetail]
    visible_events: list[EventDetail]
    overflow_count: int
    overflow_label: str | None = None


class CalendarGridResponse(_CamelSchema):
    """Response model for GET /api/calendar?view=grid."""

    year: int
    month: int
    title: str
    view: Literal["grid"] = "grid"
    days_of_week: list[str]
    days: list[CalendarDayResponse]
    legend: list[LegendEntry]


class DayGroupResponse(_CamelSchema):
    date: datetime.date
    label: str
    events: list[EventDetail]


class CalendarListResponse(_CamelSchema):
    """Response model for GET /api/calendar?view=list."""

    year: int
    month: int
    title: str
    view: Literal["list"] = "list"
    groups: list[DayGroupResponse]
    legend: list[LegendEntry]
