from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.rsvps.dependencies import get_admin_credential, get_rsvp_service
from src.rsvps.dtos import AdminCredential
from src.rsvps.service import RSVPService
from src.rsvps.urls import ADMIN_RSVPS_URL

router = APIRouter()


class RSVPListResponse(BaseModel):
    ok: bool = True
    rsvps: list[dict[str, Any]]


@router.get(ADMIN_RSVPS_URL, response_model=RSVPListResponse)
async def list_rsvps(
    credential: AdminCredential | None = Depends(get_admin_credential),
    service: RSVPService = Depends(get_rsvp_service),
) -> RSVPListResponse:
    """List stored RSVPs, newest first. Requires the admin credential."""
    records = await service.list_for_admin(credential)
    return RSVPListResponse(rsvps=[record.to_dict() for record in records])
