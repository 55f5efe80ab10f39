import dataclasses
import logging
from collections.abc import Callable
from typing import Any

from src.rsvps.auth import AdminAuthGate
from src.rsvps.dtos import AdminCredential, RSVPRecordDTO
from src.rsvps.errors import ValidationError
from src.rsvps.repository.base import DEFAULT_LIST_LIMIT, RSVPStorage
from src.rsvps.validation import DEFAULT_MAX_GUEST_COUNT, utc_now_iso, validate_submission

logger = logging.getLogger(__name__)


class RSVPService:
    """Public submissions in, admin listings out."""

    def __init__(
        self,
        storage: RSVPStorage,
        auth_gate: AdminAuthGate,
        max_guest_count: int = DEFAULT_MAX_GUEST_COUNT,
        list_limit: int = DEFAULT_LIST_LIMIT,
        clock: Callable[[], str] = utc_now_iso,
    ):
        self._storage = storage
        self._auth_gate = auth_gate
        self._max_guest_count = max_guest_count
        self._list_limit = list_limit
        self._clock = clock

    @property
    def storage(self) -> RSVPStorage:
        return self._storage

    @property
    def auth_gate(self) -> AdminAuthGate:
        return self._auth_gate

    async def submit(self, raw: Any, ip: str = "") -> str:
        """
        Validate and store one submission, returning the new record id.
        Validation failures never reach storage. The timestamp
        always comes from the server clock.
        """
        try:
            submission = validate_submission(raw, max_guest_count=self._max_guest_count, ip=ip)
        except ValidationError as e:
            logger.info("Rejected RSVP submission: %s", e)
            raise

        submission = dataclasses.replace(submission, created_at=self._clock())

        record_id = await self._storage.insert(submission)
        logger.info("Stored RSVP %s (%d guest(s))", record_id, submission.guest_count)
        return record_id

    async def list_for_admin(self, credential: AdminCredential | None) -> list[RSVPRecordDTO]:
        self._auth_gate.authorize(credential)
        return await self._storage.list(self._list_limit)

    async def health(self) -> None:
        await self._storage.ping()
