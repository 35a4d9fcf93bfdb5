"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
Each call is expected to be atomic on its own; no call spans a transaction
with another, so callers cannot rely on a read still holding at write time.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def find_all(self) -> list[Event]:
        """Return all events in creation order."""
        ...

    @abstractmethod
    def find_by_id(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def find_by_name_case_insensitive(self, name: str) -> Event | None:
        """Return the event whose name matches ignoring case, or None."""
        ...

    @abstractmethod
    def exists_by_id(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def save(self, event: Event) -> Event:
        """Insert the event, or replace the stored one with the same ID.

        Raises:
            DuplicateEventNameError: If another stored event already has
                the same name ignoring case.
        """
        ...

    @abstractmethod
    def delete_by_id(self, event_id: EventId) -> None:
        """Delete the event with the given ID, if any."""
        ...
