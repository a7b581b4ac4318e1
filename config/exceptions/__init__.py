"""
Alnwick Community Center - Canonical exception hierarchy.

Source of truth for all calendar service exceptions. The gateway maps
EventStoreError subclasses to HTTP 400/404; the admin editor converts them
into user-facing messages.
"""


class CommunityCenterError(Exception):
    """Base exception for the community center back end."""


class EventStoreError(CommunityCenterError):
    """Errors raised by the event repository."""


class EventValidationError(EventStoreError):
    """Missing or malformed event fields on create/update."""

    def __init__(self, message: str, errors: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or {}


class EventNotFoundError(EventStoreError):
    """Operation referencing an event id that does not exist."""

    def __init__(self, event_id: int) -> None:
        super().__init__(f"Event not found: {event_id}")
        self.event_id = event_id


class TransientFetchError(CommunityCenterError):
    """Network/server failure while loading events or rooms. Retryable."""


class SeedConfigError(CommunityCenterError):
    """Seed configuration file missing or invalid."""
