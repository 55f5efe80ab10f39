from fastapi import APIRouter, Depends
from fastapi.responses import Response

from src.config.settings import Settings
from src.rsvps.calendar import EventDetails, build_invite
from src.rsvps.dependencies import get_settings_from_app
from src.rsvps.urls import INVITE_ICS_URL

router = APIRouter()


@router.get(INVITE_ICS_URL)
async def download_invite(settings: Settings = Depends(get_settings_from_app)) -> Response:
    """Calendar invite for the configured event."""
    return Response(
        content=build_invite(EventDetails.from_settings(settings)),
        media_type="text/calendar; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="event.ics"'},
    )
