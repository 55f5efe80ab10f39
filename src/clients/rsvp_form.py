"""Client for the public RSVP form."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import httpx

from src.rsvps.calendar import EventDetails, build_invite
from src.rsvps.urls import HEALTH_URL, SUBMIT_RSVP_URL
from src.rsvps.validation import DEFAULT_MAX_GUEST_COUNT, utc_now_iso

logger = logging.getLogger(__name__)

NETWORK_FAILURE_MESSAGE = "Could not submit RSVP. Please try again."
SERVER_FAILURE_MESSAGE = "Something went wrong."


@dataclass(frozen=True)
class FormStatus:
    """The status line shown after a submit attempt."""

    kind: str  # "ok" or "error"
    message: str
    rsvp_id: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind == "ok"


class RSVPFormClient:
    """
    Collects form input, checks it locally and posts it as JSON.

    The local checks mirror the server's rules but are not authoritative;
    the server validates again.
    """

    def __init__(
        self,
        base_url: str,
        event: EventDetails,
        max_guest_count: int = DEFAULT_MAX_GUEST_COUNT,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._base_url = base_url.rstrip("/")
        self._event = event
        self._max_guest_count = max_guest_count
        self._http_client_class = http_client_class

    def build_payload(self, form: Mapping[str, Any]) -> dict[str, Any]:
        payload = {key: value for key, value in form.items() if value is not None}
        raw_count = payload.get("guestCount")
        try:
            payload["guestCount"] = int(raw_count) if raw_count not in (None, "") else 1
        except (TypeError, ValueError):
            payload["guestCount"] = 0
        payload["createdAt"] = utc_now_iso()
        return payload

    def check(self, payload: Mapping[str, Any]) -> str | None:
        """Return an error message for the user, or None when the payload looks fine."""
        if not str(payload.get("name") or "").strip():
            return "Please enter your name."
        guest_count = payload.get("guestCount") or 0
        if guest_count < 1:
            return "Guest count must be at least 1."
        if guest_count > self._max_guest_count:
            return f"Guest count must be at most {self._max_guest_count}."
        return None

    async def submit(self, form: Mapping[str, Any]) -> FormStatus:
        payload = self.build_payload(form)
        problem = self.check(payload)
        if problem:
            return FormStatus(kind="error", message=problem)

        try:
            async with self._http_client_class(base_url=self._base_url) as client:
                response = await client.post(SUBMIT_RSVP_URL, json=payload)
        except httpx.TransportError as e:
            logger.warning("RSVP submit failed: %s", e)
            return FormStatus(kind="error", message=NETWORK_FAILURE_MESSAGE)

        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.is_error:
            message = SERVER_FAILURE_MESSAGE
            if isinstance(data, dict):
                message = data.get("error") or data.get("message") or message
            return FormStatus(kind="error", message=message)

        rsvp_id = data.get("id") if isinstance(data, dict) else None
        suffix = f" (RSVP #{rsvp_id})" if rsvp_id else ""
        return FormStatus(
            kind="ok",
            message=f"Thanks! Your RSVP was received{suffix}.",
            rsvp_id=rsvp_id,
        )

    async def check_connection(self) -> bool:
        """Not fatal when it fails; the form may still work."""
        try:
            async with self._http_client_class(base_url=self._base_url) as client:
                response = await client.get(HEALTH_URL)
        except httpx.TransportError:
            return False
        return response.is_success

    def calendar_invite(self, now: datetime | None = None, uid: str | None = None) -> str:
        """Built from the static event details only, no network."""
        return build_invite(self._event, now=now, uid=uid)
