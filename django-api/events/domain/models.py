"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import AttendeeCount, EventId, normalize_name


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    start: datetime
    end: datetime
    location: str
    min_attendees: AttendeeCount | None = None
    max_attendees: AttendeeCount | None = None
    location_notes: str | None = None
    preparation_notes: str | None = None

    def has_name(self, name: str) -> bool:
        """Compare names the way uniqueness is enforced (ignoring case)."""
        return normalize_name(self.name) == normalize_name(name)


@dataclass(frozen=True)
class EventDraft:
    """Proposed field values for an Event that has no id yet.

    Used both for creation and as the full replacement on update.
    """

    name: str
    description: str
    start: datetime
    end: datetime
    location: str
    min_attendees: AttendeeCount | None = None
    max_attendees: AttendeeCount | None = None
    location_notes: str | None = None
    preparation_notes: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Event name cannot be blank")

    def starts_after_end(self) -> bool:
        if self.start is None or self.end is None:
            return False
        return self.start > self.end

    def to_event(self, event_id: EventId) -> Event:
        return Event(
            id=event_id,
            name=self.name,
            description=self.description,
            start=self.start,
            end=self.end,
            location=self.location,
            min_attendees=self.min_attendees,
            max_attendees=self.max_attendees,
            location_notes=self.location_notes,
            preparation_notes=self.preparation_notes,
        )
