"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.cache_keys import EVENT_LIST_KEY, current_generation, event_detail_key
from events.domain.errors import DomainError
from events.handlers.errors import error_response
from events.handlers.serializers import EventInputSerializer, EventSerializer
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        generation = current_generation()
        data = cache.get(EVENT_LIST_KEY, version=generation)
        if data is None:
            events = get_event_service().list_events()
            data = [dict(item) for item in EventSerializer(events, many=True).data]
            cache.set(
                EVENT_LIST_KEY, data, settings.EVENTS_CACHE_TIMEOUT, version=generation
            )
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event = get_event_service().create_event(serializer.to_draft())
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        generation = current_generation()
        data = cache.get(event_detail_key(event_id), version=generation)
        if data is None:
            try:
                event = get_event_service().get_event(event_id)
            except DomainError as error:
                return error_response(error)
            data = dict(EventSerializer(event).data)
            cache.set(
                event_detail_key(str(event.id)),
                data,
                settings.EVENTS_CACHE_TIMEOUT,
                version=generation,
            )
        return Response(data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event = get_event_service().update_event(event_id, serializer.to_draft())
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            get_event_service().delete_event(event_id)
        except DomainError as error:
            return error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)
