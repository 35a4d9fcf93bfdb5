"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Uniqueness is check-then-act: the name lookup and the following save are
separate store calls, so two concurrent proposals for the same name can both
pass the lookup. The store enforces uniqueness on save as the authoritative
backstop and raises DuplicateEventNameError, which propagates from here
unchanged. Storage failures also propagate unchanged; nothing is retried.
"""

import logging

from events.domain import Event, EventDraft, EventId
from events.domain.errors import (
    DuplicateEventNameError,
    EventNotFoundError,
    InvalidDateRangeError,
    InvalidEventIdError,
)
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events in creation order."""
        return self._store.find_all()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.find_by_id(_parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, draft: EventDraft) -> Event:
        """Validate a new event and persist it with a fresh ID.

        Raises:
            DuplicateEventNameError: If an event with the same name
                (ignoring case) already exists.
            InvalidDateRangeError: If the draft starts after it ends.
        """
        if self._store.find_by_name_case_insensitive(draft.name) is not None:
            logger.warning(f"Rejected create: duplicate name {draft.name!r}")
            raise DuplicateEventNameError(draft.name)

        if draft.starts_after_end():
            logger.warning(
                f"Rejected create of {draft.name!r}: "
                f"start {draft.start} is after end {draft.end}"
            )
            raise InvalidDateRangeError()

        event = self._store.save(draft.to_event(EventId.generate()))
        logger.info(f"Created event {event.id} ({event.name!r})")
        return event

    def update_event(self, event_id: str, draft: EventDraft) -> Event:
        """Replace every field of an existing event except its ID.

        The date range is not checked here, only on create, so an update
        may store an event whose start is after its end.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            DuplicateEventNameError: If a different event already uses
                the new name (ignoring case).
        """
        current = self._store.find_by_id(_parse_event_id(event_id))
        if current is None:
            raise EventNotFoundError(event_id)

        # Keeping its own name, in any casing, never collides with itself.
        if not current.has_name(draft.name):
            owner = self._store.find_by_name_case_insensitive(draft.name)
            if owner is not None and owner.id != current.id:
                logger.warning(
                    f"Rejected update of {current.id}: "
                    f"name {draft.name!r} belongs to {owner.id}"
                )
                raise DuplicateEventNameError(draft.name)

        event = self._store.save(draft.to_event(current.id))
        logger.info(f"Updated event {event.id} ({event.name!r})")
        return event

    def delete_event(self, event_id: str) -> None:
        """Delete an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = _parse_event_id(event_id)
        if not self._store.exists_by_id(parsed):
            raise EventNotFoundError(event_id)
        self._store.delete_by_id(parsed)
        logger.info(f"Deleted event {parsed}")
