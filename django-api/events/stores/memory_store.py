"""In-process implementation of the EventStore.

Keeps events in insertion order behind a lock so each call is atomic.
Used by the service tests and anywhere a database is not wanted.
"""

import threading

from events.domain import Event, EventId, normalize_name
from events.domain.errors import DuplicateEventNameError
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Dictionary-backed event store."""

    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}
        self._lock = threading.Lock()

    def find_all(self) -> list[Event]:
        with self._lock:
            return list(self._events.values())

    def find_by_id(self, event_id: EventId) -> Event | None:
        with self._lock:
            return self._events.get(event_id)

    def find_by_name_case_insensitive(self, name: str) -> Event | None:
        with self._lock:
            return self._find_by_name(name)

    def exists_by_id(self, event_id: EventId) -> bool:
        with self._lock:
            return event_id in self._events

    def save(self, event: Event) -> Event:
        with self._lock:
            owner = self._find_by_name(event.name)
            if owner is not None and owner.id != event.id:
                raise DuplicateEventNameError(event.name)
            # Replacing an existing key keeps its original position.
            self._events[event.id] = event
            return event

    def delete_by_id(self, event_id: EventId) -> None:
        with self._lock:
            self._events.pop(event_id, None)

    def _find_by_name(self, name: str) -> Event | None:
        key = normalize_name(name)
        for event in self._events.values():
            if normalize_name(event.name) == key:
                return event
        return None
