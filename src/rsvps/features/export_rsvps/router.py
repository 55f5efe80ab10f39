from fastapi import APIRouter, Depends
from fastapi.responses import Response

from src.rsvps.dependencies import get_admin_credential, get_rsvp_service
from src.rsvps.dtos import AdminCredential
from src.rsvps.export import rsvps_to_csv
from src.rsvps.service import RSVPService
from src.rsvps.urls import ADMIN_RSVPS_CSV_URL

router = APIRouter()


@router.get(ADMIN_RSVPS_CSV_URL)
async def export_rsvps(
    credential: AdminCredential | None = Depends(get_admin_credential),
    service: RSVPService = Depends(get_rsvp_service),
) -> Response:
    """Download the stored RSVPs as CSV. Requires the admin credential."""
    records = await service.list_for_admin(credential)
    return Response(
        content=rsvps_to_csv(record.to_dict() for record in records),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="rsvps.csv"'},
    )
