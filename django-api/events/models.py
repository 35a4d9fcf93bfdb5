"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models

from events.domain import normalize_name

NAME_KEY_FIELD = "name_key"
UNIQUE_NAME_CONSTRAINT = "events_event_name_key_unique"


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    # normalize_name(name); database collations fold only ASCII letters,
    # so uniqueness is enforced on the key Python computes.
    name_key = models.CharField(max_length=255, editable=False)
    description = models.TextField()
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    location = models.CharField(max_length=255)
    min_attendees = models.PositiveIntegerField(blank=True, null=True)
    max_attendees = models.PositiveIntegerField(blank=True, null=True)
    location_notes = models.TextField(blank=True, null=True)
    preparation_notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="events_event_created_idx"),
        ]
        constraints = [
            # Backstop for the service's check-then-save uniqueness check.
            models.UniqueConstraint(fields=[NAME_KEY_FIELD], name=UNIQUE_NAME_CONSTRAINT),
        ]

    def __str__(self) -> str:
        return self.name

    def save(self, *args, **kwargs):
        self.name_key = normalize_name(self.name)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "name" in update_fields:
            kwargs["update_fields"] = {*update_fields, NAME_KEY_FIELD}
        super().save(*args, **kwargs)
