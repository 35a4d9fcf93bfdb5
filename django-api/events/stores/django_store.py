"""Django ORM implementation of the EventStore."""

import logging

from django.db import IntegrityError, transaction

from events import models
from events.domain import AttendeeCount, Event, EventId, normalize_name
from events.domain.errors import DuplicateEventNameError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        name=row.name,
        description=row.description,
        start=row.start_date,
        end=row.end_date,
        location=row.location,
        min_attendees=_count(row.min_attendees),
        max_attendees=_count(row.max_attendees),
        location_notes=row.location_notes,
        preparation_notes=row.preparation_notes,
    )


def _count(value: int | None) -> AttendeeCount | None:
    return None if value is None else AttendeeCount(value)


def _value(count: AttendeeCount | None) -> int | None:
    return None if count is None else count.value


def _violates_unique_name(exc: IntegrityError) -> bool:
    # SQLite names the column, PostgreSQL names the constraint.
    message = str(exc)
    return (
        models.UNIQUE_NAME_CONSTRAINT in message
        or f"events_event.{models.NAME_KEY_FIELD}" in message
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def find_all(self) -> list[Event]:
        return [_to_domain(row) for row in models.Event.objects.order_by("created_at")]

    def find_by_id(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(id=event_id.value).first()
        return None if row is None else _to_domain(row)

    def find_by_name_case_insensitive(self, name: str) -> Event | None:
        row = models.Event.objects.filter(name_key=normalize_name(name)).first()
        return None if row is None else _to_domain(row)

    def exists_by_id(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(id=event_id.value).exists()

    def save(self, event: Event) -> Event:
        defaults = {
            "name": event.name,
            "name_key": normalize_name(event.name),
            "description": event.description,
            "start_date": event.start,
            "end_date": event.end,
            "location": event.location,
            "min_attendees": _value(event.min_attendees),
            "max_attendees": _value(event.max_attendees),
            "location_notes": event.location_notes,
            "preparation_notes": event.preparation_notes,
        }
        try:
            with transaction.atomic():
                row, _ = models.Event.objects.update_or_create(
                    id=event.id.value, defaults=defaults
                )
        except IntegrityError as exc:
            if not _violates_unique_name(exc):
                raise
            logger.warning(
                f"Unique name constraint rejected event {event.id} "
                f"(name: {event.name!r})"
            )
            raise DuplicateEventNameError(event.name) from exc
        return _to_domain(row)

    def delete_by_id(self, event_id: EventId) -> None:
        models.Event.objects.filter(id=event_id.value).delete()
