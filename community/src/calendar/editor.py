"""
Admin Event Editor - form-driven create/update/delete over the Event Store.

Store errors never cross this boundary: every operation returns an
EditorResult carrying either the saved event or user-facing messages
(field-level errors included) so the form can be re-presented.
Successful mutations invalidate every subscribed CalendarView.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Any, Callable, Mapping, Protocol

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from community.src.calendar.models import Event
from community.src.calendar.presentation import Category
from config.exceptions import EventNotFoundError, EventValidationError

if TYPE_CHECKING:
    from community.src.adapters.event_store import EventRepository

logger = structlog.get_logger(__name__)

CATEGORY_OPTIONS: tuple[str, ...] = tuple(c.value for c in Category if c is not Category.OTHER)
DEFAULT_CATEGORY = Category.CLASSES.value
DELETE_CONFIRMATION = "Are you sure you want to delete this event?"

# Wire field -> message when left empty
REQUIRED_MESSAGES: dict[str, str] = {
    "title": "Title is required",
    "description": "Description is required",
    "date": "Date is required",
    "startTime": "Start time is required",
    "endTime": "End time is required",
    "roomId": "Room is required",
    "category": "Category is required",
}


class Invalidatable(Protocol):
    def notify_mutation(self) -> None: ...


class EventForm(BaseModel):
    """Raw form values, as typed by the admin. Everything may be empty."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    title: str = ""
    description: str = ""
    date: str = ""
    start_time: str = ""
    end_time: str = ""
    room_id: int | str | None = None
    category: str = DEFAULT_CATEGORY

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


_WIRE_NAMES = {name: to_camel(name) for name in EventForm.model_fields}


def _wire_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    """Accept python or wire field names, return wire names."""
    return {_WIRE_NAMES.get(key, key): value for key, value in data.items()}


@dataclass
class EditorResult:
    """Outcome of an editor action, ready to show as a toast."""

    ok: bool
    title: str
    message: str = ""
    event: Event | None = None
    errors: dict[str, str] = field(default_factory=dict)


class AdminEventEditor:
    """
    CRUD form controller for the admin events page.

    Args:
        repository: Event Store
    """

    def __init__(self, repository: EventRepository) -> None:
        self.repository = repository
        self._subscribers: list[Invalidatable] = []

    # ---------- Subscriptions ----------

    def subscribe(self, view: Invalidatable) -> None:
        if view not in self._subscribers:
            self._subscribers.append(view)

    def unsubscribe(self, view: Invalidatable) -> None:
        if view in self._subscribers:
            self._subscribers.remove(view)

    def _invalidate(self) -> None:
        for view in self._subscribers:
            view.notify_mutation()

    # ---------- Forms ----------

    def room_options(self) -> list[tuple[int, str]]:
        """(id, name) pairs for the room select."""
        return [(room.id, room.name) for room in self.repository.rooms.list_rooms()]

    def new_form(self, on_date: date | None = None) -> EventForm:
        """Empty create form, date prefilled when opened from a grid cell."""
        return EventForm(date=on_date.isoformat() if on_date else "")

    def edit_form(self, event: Event) -> EventForm:
        return EventForm(
            title=event.title,
            description=event.description,
            date=event.date,
            start_time=event.start_time,
            end_time=event.end_time,
            room_id=event.room_id,
            category=event.category,
        )

    def validate(self, data: EventForm | Mapping[str, Any]) -> dict[str, str]:
        """
        Client-side checks run before any store call.

        Returns:
            Field -> message, empty when the form can be submitted
        """
        errors: dict[str, str] = {}
        if isinstance(data, EventForm):
            payload = data.to_payload()
        else:
            payload = {**EventForm().to_payload(), **_wire_keys(data)}
            try:
                EventForm.model_validate(payload)
            except ValidationError as exc:
                for err in exc.errors():
                    if err["loc"]:
                        field_name = str(err["loc"][0])
                        errors[field_name] = REQUIRED_MESSAGES.get(field_name, f"{field_name} is invalid")

        for name, message in REQUIRED_MESSAGES.items():
            value = payload.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                errors.setdefault(name, message)

        if "roomId" not in errors:
            try:
                room_id = None if isinstance(payload["roomId"], bool) else int(payload["roomId"])
            except (TypeError, ValueError):
                room_id = None
            # The room comes from a fixed select, never free text
            if room_id is None or room_id not in self.repository.rooms:
                errors["roomId"] = REQUIRED_MESSAGES["roomId"]

        return errors

    # ---------- Actions ----------

    def _submit(
        self,
        action: str,
        data: EventForm | Mapping[str, Any],
        store_call: Callable[[dict[str, Any]], Event],
    ) -> EditorResult:
        failure_title = f"Failed to {action} event"

        errors = self.validate(data)
        if errors:
            return EditorResult(
                ok=False, title=failure_title, message="; ".join(errors.values()), errors=errors
            )

        form = data if isinstance(data, EventForm) else EventForm.model_validate(dict(data))
        try:
            event = store_call(form.to_payload())
        except EventValidationError as exc:
            return EditorResult(
                ok=False, title=failure_title, message=exc.message, errors=dict(exc.errors)
            )
        except EventNotFoundError:
            return EditorResult(ok=False, title=failure_title, message="Event not found")

        self._invalidate()
        return EditorResult(
            ok=True,
            title=f"Event {action}d",
            message=f"The event has been {action}d successfully.",
            event=event,
        )

    def create(self, data: EventForm | Mapping[str, Any]) -> EditorResult:
        return self._submit("create", data, self.repository.create_event)

    def update(self, event_id: int, data: EventForm | Mapping[str, Any]) -> EditorResult:
        return self._submit(
            "update", data, lambda payload: self.repository.update_event(event_id, payload)
        )

    def delete(self, event_id: int, confirm: Callable[[str], bool]) -> EditorResult:
        """
        Delete after explicit confirmation.

        Args:
            event_id: Event to delete
            confirm: Asked DELETE_CONFIRMATION; the store is untouched unless
                     it returns True
        """
        if not confirm(DELETE_CONFIRMATION):
            logger.debug("event_delete_cancelled", event_id=event_id)
            return EditorResult(ok=False, title="Delete cancelled")

        if not self.repository.delete_event(event_id):
            return EditorResult(ok=False, title="Failed to delete event", message="Event not found")

        self._invalidate()
        return EditorResult(
            ok=True, title="Event deleted", message="The event has been deleted successfully."
        )
