"""Serializers for transforming domain models to API responses and back.

Field names follow the client's camelCase JSON.
"""

from rest_framework import serializers

from events.domain import AttendeeCount, EventDraft


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    startDate = serializers.DateTimeField(source="start")
    endDate = serializers.DateTimeField(source="end")
    location = serializers.CharField()
    minAttendees = serializers.IntegerField(source="min_attendees.value", allow_null=True)
    maxAttendees = serializers.IntegerField(source="max_attendees.value", allow_null=True)
    locationNotes = serializers.CharField(source="location_notes", allow_null=True)
    preparationNotes = serializers.CharField(source="preparation_notes", allow_null=True)


class EventInputSerializer(serializers.Serializer):
    """Validates the payload of create and update requests.

    Only checks shape and field formats. Date ordering and name uniqueness
    are decided by EventService.
    """

    name = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True)
    startDate = serializers.DateTimeField(source="start")
    endDate = serializers.DateTimeField(source="end")
    location = serializers.CharField(max_length=255, allow_blank=True)
    minAttendees = serializers.IntegerField(
        source="min_attendees", min_value=0, allow_null=True, default=None
    )
    maxAttendees = serializers.IntegerField(
        source="max_attendees", min_value=0, allow_null=True, default=None
    )
    locationNotes = serializers.CharField(
        source="location_notes", allow_null=True, allow_blank=True, default=None
    )
    preparationNotes = serializers.CharField(
        source="preparation_notes", allow_null=True, allow_blank=True, default=None
    )

    def to_draft(self) -> EventDraft:
        data = self.validated_data
        return EventDraft(
            name=data["name"],
            description=data["description"],
            start=data["start"],
            end=data["end"],
            location=data["location"],
            min_attendees=_count(data["min_attendees"]),
            max_attendees=_count(data["max_attendees"]),
            location_notes=data["location_notes"],
            preparation_notes=data["preparation_notes"],
        )


def _count(value: int | None) -> AttendeeCount | None:
    return None if value is None else AttendeeCount(value)
