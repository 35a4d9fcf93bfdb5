from events.domain.models import Event, EventDraft
from events.domain.value_objects import AttendeeCount, EventId, normalize_name

__all__ = [
    "Event",
    "EventDraft",
    "EventId",
    "AttendeeCount",
    "normalize_name",
]
