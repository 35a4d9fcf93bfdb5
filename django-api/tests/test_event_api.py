"""Integration tests for the /api/events resource.

Run with: pytest tests/test_event_api.py -v
"""

import pytest
from rest_framework.test import APIClient

from events import models

from factories import event_payload

UNUSED_ID = "00000000-0000-0000-0000-000000000000"


def create(api_client: APIClient, name: str, **overrides) -> dict:
    response = api_client.post("/api/events", event_payload(name, **overrides), format="json")
    assert response.status_code == 201, response.content
    return response.json()


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /api/events"""

    def test_list_events_in_creation_order(self, api_client: APIClient):
        """Given events exist, returns all of them in creation order."""
        create(
            api_client,
            "Event 1",
            startDate="2025-12-01T09:00:00",
            endDate="2025-12-02T17:00:00",
        )
        create(
            api_client,
            "Event 2",
            startDate="2025-12-05T09:00:00",
            endDate="2025-12-10T17:00:00",
        )

        response = api_client.get("/api/events")

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 2
        assert body[0]["name"] == "Event 1"
        assert body[1]["name"] == "Event 2"

    def test_list_events_empty(self, api_client: APIClient):
        """Given no events, returns empty list."""
        response = api_client.get("/api/events")

        assert response.status_code == 200
        assert response.json() == []


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient):
        """Given event exists, returns event details."""
        created = create(api_client, "Tech Summit", description="Annual tech conference")

        response = api_client.get(f"/api/events/{created['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Tech Summit"
        assert body["description"] == "Annual tech conference"
        assert body["startDate"] == "2025-12-01T10:00:00Z"
        assert body["endDate"] == "2025-12-01T18:00:00Z"
        assert body["minAttendees"] is None
        assert body["locationNotes"] is None

    def test_get_event_not_found(self, api_client: APIClient):
        """Given event does not exist, returns 404."""
        response = api_client.get(f"/api/events/{UNUSED_ID}")

        assert response.status_code == 404
        assert response.json()["code"] == "EVENT_NOT_FOUND"

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        """Given invalid UUID, returns 400."""
        response = api_client.get("/api/events/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EVENT_ID"


@pytest.mark.django_db
class TestEventCreate:
    """Tests for POST /api/events"""

    def test_create_event(self, api_client: APIClient):
        response = api_client.post(
            "/api/events",
            event_payload(
                "New Event",
                minAttendees=10,
                maxAttendees=100,
                locationNotes="Room 4",
                preparationNotes="Set up chairs",
            ),
            format="json",
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert body["name"] == "New Event"
        assert body["description"] == "New description"
        assert body["minAttendees"] == 10
        assert body["maxAttendees"] == 100
        assert body["locationNotes"] == "Room 4"
        assert body["preparationNotes"] == "Set up chairs"
        assert models.Event.objects.filter(id=body["id"]).exists()

    def test_create_duplicate_name_conflicts(self, api_client: APIClient):
        create(api_client, "Duplicate Event")

        response = api_client.post(
            "/api/events", event_payload("Duplicate Event"), format="json"
        )

        assert response.status_code == 409
        assert response.json() == {
            "code": "DUPLICATE_EVENT_NAME",
            "message": "An event with this name already exists",
        }

    def test_create_duplicate_name_different_case_conflicts(self, api_client: APIClient):
        create(api_client, "Duplicate Event")

        response = api_client.post(
            "/api/events", event_payload("duplicate event"), format="json"
        )

        assert response.status_code == 409
        assert response.json()["message"] == "An event with this name already exists"
        assert models.Event.objects.count() == 1

    def test_create_duplicate_non_ascii_name_different_case_conflicts(
        self, api_client: APIClient
    ):
        create(api_client, "ÉTÉ Fest")

        response = api_client.post("/api/events", event_payload("été fest"), format="json")

        assert response.status_code == 409
        assert models.Event.objects.count() == 1

    def test_create_start_after_end_rejected(self, api_client: APIClient):
        response = api_client.post(
            "/api/events",
            event_payload(startDate="2025-12-02T10:00:00", endDate="2025-12-01T18:00:00"),
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_DATE_RANGE"
        assert models.Event.objects.count() == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": ""},
            {"startDate": "not a date"},
            {"minAttendees": -1},
        ],
    )
    def test_create_malformed_payload_rejected(self, api_client: APIClient, overrides):
        response = api_client.post("/api/events", event_payload(**overrides), format="json")

        assert response.status_code == 400
        assert models.Event.objects.count() == 0

    def test_create_missing_required_field_rejected(self, api_client: APIClient):
        payload = event_payload()
        del payload["endDate"]

        response = api_client.post("/api/events", payload, format="json")

        assert response.status_code == 400
        assert "endDate" in response.json()


@pytest.mark.django_db
class TestEventUpdate:
    """Tests for PUT /api/events/{id}"""

    def test_update_event(self, api_client: APIClient):
        created = create(api_client, "Original Name")

        response = api_client.put(
            f"/api/events/{created['id']}",
            event_payload("Updated Name", description="Updated description"),
            format="json",
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["name"] == "Updated Name"
        assert body["description"] == "Updated description"

    def test_update_keeping_same_name(self, api_client: APIClient):
        created = create(api_client, "Event Name")

        response = api_client.put(
            f"/api/events/{created['id']}",
            event_payload("Event Name", description="Updated description"),
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Event Name"
        assert response.json()["description"] == "Updated description"

    def test_update_to_existing_name_conflicts(self, api_client: APIClient):
        create(api_client, "Event 1")
        second = create(api_client, "Event 2")

        response = api_client.put(
            f"/api/events/{second['id']}", event_payload("Event 1"), format="json"
        )

        assert response.status_code == 409
        assert response.json()["message"] == "An event with this name already exists"

    def test_update_to_existing_name_different_case_conflicts(self, api_client: APIClient):
        create(api_client, "Event 1")
        second = create(api_client, "Event 2")

        response = api_client.put(
            f"/api/events/{second['id']}", event_payload("EVENT 1"), format="json"
        )

        assert response.status_code == 409

    def test_update_to_existing_non_ascii_name_different_case_conflicts(
        self, api_client: APIClient
    ):
        create(api_client, "Ärger")
        other = create(api_client, "Other")

        response = api_client.put(
            f"/api/events/{other['id']}", event_payload("ärger"), format="json"
        )

        assert response.status_code == 409
        assert api_client.get(f"/api/events/{other['id']}").json()["name"] == "Other"

    def test_update_not_found(self, api_client: APIClient):
        response = api_client.put(
            f"/api/events/{UNUSED_ID}", event_payload("Anything"), format="json"
        )

        assert response.status_code == 404

    def test_update_allows_start_after_end(self, api_client: APIClient):
        created = create(api_client, "Event")

        response = api_client.put(
            f"/api/events/{created['id']}",
            event_payload("Event", startDate="2025-12-02T10:00:00", endDate="2025-12-01T18:00:00"),
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["startDate"] == "2025-12-02T10:00:00Z"


@pytest.mark.django_db
class TestEventDelete:
    """Tests for DELETE /api/events/{id}"""

    def test_delete_event(self, api_client: APIClient):
        created = create(api_client, "Short Lived")

        response = api_client.delete(f"/api/events/{created['id']}")

        assert response.status_code == 204
        assert api_client.get(f"/api/events/{created['id']}").status_code == 404

    def test_delete_not_found(self, api_client: APIClient):
        response = api_client.delete(f"/api/events/{UNUSED_ID}")

        assert response.status_code == 404

    def test_delete_invalid_id_format(self, api_client: APIClient):
        response = api_client.delete("/api/events/123")

        assert response.status_code == 400
