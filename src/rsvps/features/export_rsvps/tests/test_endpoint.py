import pytest

from src.rsvps.export import CSV_COLUMNS
from src.rsvps.urls import ADMIN_RSVPS_CSV_URL, SUBMIT_RSVP_URL


@pytest.mark.asyncio
async def test_export_csv(client, settings):
    await client.post(SUBMIT_RSVP_URL, json={"name": 'Jane "JD" Doe', "guestCount": 2})
    await client.post(SUBMIT_RSVP_URL, json={"name": "John Roe", "guestCount": 1})

    response = await client.get(ADMIN_RSVPS_CSV_URL, auth=("admin", settings.admin_password))

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="rsvps.csv"' in response.headers["content-disposition"]
    lines = response.text.split("\n")
    assert lines[0] == ",".join(CSV_COLUMNS)
    assert len(lines) == 3
    assert any('"Jane ""JD"" Doe"' in line for line in lines[1:])


@pytest.mark.asyncio
async def test_export_requires_admin(client, storage):
    response = await client.get(ADMIN_RSVPS_CSV_URL, auth=("admin", "wrong"))

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"].startswith("Basic")
    assert storage.list_calls == 0
