from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.rsvps.dependencies import get_rsvp_service
from src.rsvps.errors import StorageError
from src.rsvps.service import RSVPService
from src.rsvps.urls import HEALTH_URL

router = APIRouter()


class HealthCheckResponse(BaseModel):
    ok: bool
    error: str | None = None


@router.get(HEALTH_URL, response_model=HealthCheckResponse, response_model_exclude_none=True)
async def health_check(service: RSVPService = Depends(get_rsvp_service)):
    """
    Health check endpoint to verify the API and its storage are reachable.
    """
    try:
        await service.health()
    except StorageError as e:
        return JSONResponse(status_code=500, content={"ok": False, "error": str(e)})
    return HealthCheckResponse(ok=True)
