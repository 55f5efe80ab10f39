import abc
import asyncio

from src.rsvps.dtos import RSVPRecordDTO, RSVPSubmissionDTO

DEFAULT_LIST_LIMIT = 5000


class RSVPStorage(abc.ABC):
    """
    Append-only RSVP store.

    Implementations open their connection in `_open` and release it in
    `_close`; `connect` memoizes the open so concurrent first callers share
    a single connection.
    """

    def __init__(self):
        self._connected = False
        self._connect_lock = asyncio.Lock()

    @property
    def connected(self) -> bool:
        return self._connected

    async def connect(self) -> None:
        if self._connected:
            return
        async with self._connect_lock:
            if self._connected:
                return
            await self._open()
            self._connected = True

    async def close(self) -> None:
        async with self._connect_lock:
            if not self._connected:
                return
            await self._close()
            self._connected = False

    @abc.abstractmethod
    async def _open(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def _close(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def ping(self) -> None:
        """Round-trip to the store. Raises StorageError on failure."""
        raise NotImplementedError

    @abc.abstractmethod
    async def insert(self, record: RSVPSubmissionDTO) -> str:
        """Persist a new record and return its storage-assigned id."""
        raise NotImplementedError

    @abc.abstractmethod
    async def list(self, limit: int = DEFAULT_LIST_LIMIT) -> list[RSVPRecordDTO]:
        """Return at most `limit` records, newest first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def count(self) -> int:
        raise NotImplementedError
