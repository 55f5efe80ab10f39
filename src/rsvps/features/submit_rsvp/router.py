import json

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from src.rsvps.dependencies import get_rsvp_service
from src.rsvps.errors import ValidationError
from src.rsvps.service import RSVPService
from src.rsvps.urls import SUBMIT_RSVP_URL

router = APIRouter()


class SubmitRSVPResponse(BaseModel):
    ok: bool = True
    id: str


@router.post(SUBMIT_RSVP_URL, response_model=SubmitRSVPResponse, status_code=201)
async def submit_rsvp(
    request: Request,
    service: RSVPService = Depends(get_rsvp_service),
) -> SubmitRSVPResponse:
    """
    Store a public RSVP submission.
    The body is validated by the service rather than by a pydantic model so
    malformed input answers 400 with a single error message.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError("invalid JSON body")

    ip = request.client.host if request.client else ""
    record_id = await service.submit(payload, ip=ip)
    return SubmitRSVPResponse(id=record_id)
