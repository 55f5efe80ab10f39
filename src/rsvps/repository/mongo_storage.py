"""Document RSVP storage backed by MongoDB through Motor."""

import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from src.config.table_names import TableNames
from src.rsvps.dtos import RSVPRecordDTO, RSVPSubmissionDTO
from src.rsvps.errors import StorageError
from src.rsvps.repository.base import DEFAULT_LIST_LIMIT, RSVPStorage

logger = logging.getLogger(__name__)


def _to_document(record: RSVPSubmissionDTO) -> dict[str, Any]:
    return {
        "name": record.name,
        "email": record.email,
        "phone": record.phone,
        "attending": record.attending,
        "guestCount": record.guest_count,
        "meal": record.meal,
        "allergies": record.allergies,
        "message": record.message,
        "createdAt": record.created_at,
        "ip": record.ip,
    }


def _to_dto(doc: dict[str, Any]) -> RSVPRecordDTO:
    return RSVPRecordDTO(
        id=str(doc["_id"]),
        name=doc.get("name", ""),
        guest_count=int(doc.get("guestCount", 1)),
        email=doc.get("email", ""),
        phone=doc.get("phone", ""),
        attending=doc.get("attending", ""),
        meal=doc.get("meal", ""),
        allergies=doc.get("allergies", ""),
        message=doc.get("message", ""),
        created_at=doc.get("createdAt", ""),
        ip=doc.get("ip", ""),
    )


class MongoRSVPStorage(RSVPStorage):
    """Stores RSVPs as documents of the `rsvps` collection."""

    def __init__(
        self,
        uri: str,
        db_name: str,
        client_class: type[AsyncIOMotorClient] = AsyncIOMotorClient,
    ):
        super().__init__()
        self._uri = uri
        self._db_name = db_name
        self._client_class = client_class
        self._client = None
        self._collection = None

    async def _open(self) -> None:
        client = None
        try:
            client = self._client_class(self._uri, serverSelectionTimeoutMS=5000)
            collection = client[self._db_name][TableNames.RSVPS.value]
            await collection.create_index([("createdAt", DESCENDING)])
        except PyMongoError as e:
            if client is not None:
                client.close()
            logger.exception("Could not initialise MongoDB")
            raise StorageError("Could not connect to the database.") from e

        self._client = client
        self._collection = collection
        logger.info("Connected to MongoDB database %s", self._db_name)

    async def _close(self) -> None:
        if self._client is not None:
            self._client.close()
        self._client = None
        self._collection = None

    async def ping(self) -> None:
        await self.connect()
        try:
            await self._client[self._db_name].command("ping")
        except PyMongoError as e:
            logger.exception("MongoDB ping failed")
            raise StorageError("db error") from e

    async def insert(self, record: RSVPSubmissionDTO) -> str:
        await self.connect()
        try:
            result = await self._collection.insert_one(_to_document(record))
        except PyMongoError as e:
            logger.exception("Failed to insert RSVP")
            raise StorageError("Could not save RSVP.") from e
        return str(result.inserted_id)

    async def list(self, limit: int = DEFAULT_LIST_LIMIT) -> list[RSVPRecordDTO]:
        await self.connect()
        cursor = (
            self._collection.find({})
            .sort([("createdAt", DESCENDING), ("_id", DESCENDING)])
            .limit(limit)
        )
        try:
            docs = await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.exception("Failed to list RSVPs")
            raise StorageError("Could not load RSVPs.") from e
        return [_to_dto(doc) for doc in docs]

    async def count(self) -> int:
        await self.connect()
        try:
            return await self._collection.count_documents({})
        except PyMongoError as e:
            logger.exception("Failed to count RSVPs")
            raise StorageError("Could not count RSVPs.") from e
