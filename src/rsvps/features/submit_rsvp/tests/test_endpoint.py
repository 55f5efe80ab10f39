import pytest

from src.rsvps.dependencies import get_rsvp_service
from src.rsvps.errors import StorageError
from src.rsvps.urls import SUBMIT_RSVP_URL


class FailingRSVPService:
    """Service whose storage is down."""

    def __init__(self):
        self.calls = []

    async def submit(self, raw, ip=""):
        self.calls.append(raw)
        raise StorageError("Could not save RSVP.")


@pytest.mark.asyncio
async def test_submit_rsvp_success(client, storage):
    """Test that a valid submission is stored and its id returned."""
    response = await client.post(
        SUBMIT_RSVP_URL,
        json={
            "name": "Jane Doe",
            "email": "jane@example.com",
            "attending": "yes",
            "guestCount": 2,
            "meal": "vegetarian",
            "message": "Can't wait!",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["ok"] is True
    assert data["id"]

    [record] = await storage.list()
    assert record.id == data["id"]
    assert record.name == "Jane Doe"
    assert record.guest_count == 2
    assert record.meal == "vegetarian"
    assert record.ip


@pytest.mark.asyncio
async def test_submit_rsvp_ids_are_unique(client):
    ids = set()
    for i in range(5):
        response = await client.post(SUBMIT_RSVP_URL, json={"name": f"Guest {i}", "guestCount": 1})
        assert response.status_code == 201
        ids.add(response.json()["id"])

    assert len(ids) == 5


@pytest.mark.asyncio
async def test_empty_name_is_rejected_and_nothing_stored(client, storage):
    """Submitting {name: "", guestCount: 1} answers 400 and stores nothing."""
    before = await storage.count()

    response = await client.post(SUBMIT_RSVP_URL, json={"name": "", "guestCount": 1})

    assert response.status_code == 400
    assert response.json() == {"error": "name required"}
    assert await storage.count() == before
    assert storage.insert_calls == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("guest_count", [0, -1, 51, "abc"])
async def test_invalid_guest_count_is_rejected(client, storage, guest_count):
    response = await client.post(SUBMIT_RSVP_URL, json={"name": "Jane", "guestCount": guest_count})

    assert response.status_code == 400
    assert response.json() == {"error": "invalid guest count"}
    assert await storage.count() == 0


@pytest.mark.asyncio
async def test_non_json_body_is_rejected(client, storage):
    response = await client.post(
        SUBMIT_RSVP_URL, content=b"name=Jane", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert "error" in response.json()
    assert await storage.count() == 0


@pytest.mark.asyncio
async def test_json_array_body_is_rejected(client):
    response = await client.post(SUBMIT_RSVP_URL, json=[{"name": "Jane"}])

    assert response.status_code == 400
    assert response.json() == {"error": "invalid payload"}


@pytest.mark.asyncio
async def test_storage_failure_returns_500(client_factory):
    service = FailingRSVPService()

    async with client_factory({get_rsvp_service: lambda: service}) as client:
        response = await client.post(SUBMIT_RSVP_URL, json={"name": "Jane", "guestCount": 1})

    assert response.status_code == 500
    assert response.json() == {"error": "Could not save RSVP."}
    assert len(service.calls) == 1


@pytest.mark.asyncio
async def test_storage_failure_from_adapter_returns_500(client, storage):
    storage.fail_writes = True

    response = await client.post(SUBMIT_RSVP_URL, json={"name": "Jane", "guestCount": 1})

    assert response.status_code == 500
    assert response.json() == {"error": "Could not save RSVP."}


@pytest.mark.asyncio
@pytest.mark.parametrize("created_at", ["2099-01-01T00:00:00Z", "not a date"])
async def test_client_created_at_is_replaced_by_server_time(client, storage, created_at):
    response = await client.post(SUBMIT_RSVP_URL, json={"name": "Jane", "createdAt": created_at})

    assert response.status_code == 201
    [record] = await storage.list()
    assert record.created_at != created_at
    assert not record.created_at.startswith("2099")
    assert record.created_at.endswith("Z")
