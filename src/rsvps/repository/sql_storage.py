"""Relational RSVP storage backed by SQLAlchemy's async engine."""

import logging

from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.config.database import async_session_manager, create_engine, create_session_maker
from src.models.base import BaseModel
from src.rsvps.dtos import RSVPRecordDTO, RSVPSubmissionDTO
from src.rsvps.errors import StorageError
from src.rsvps.repository.base import DEFAULT_LIST_LIMIT, RSVPStorage
from src.rsvps.repository.orm_models import RSVP

logger = logging.getLogger(__name__)


def _to_dto(row: RSVP) -> RSVPRecordDTO:
    return RSVPRecordDTO(
        id=str(row.id),
        name=row.name,
        guest_count=row.guest_count,
        email=row.email or "",
        phone=row.phone or "",
        attending=row.attending or "",
        meal=row.meal or "",
        allergies=row.allergies or "",
        message=row.message or "",
        created_at=row.created_at,
        ip=row.ip or "",
    )


class SqlRSVPStorage(RSVPStorage):
    """Stores RSVPs as rows of the `rsvps` table."""

    def __init__(self, database_url: str, echo: bool = False, create_tables: bool = True):
        super().__init__()
        self._database_url = database_url
        self._echo = echo
        self._create_tables = create_tables
        self._engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[AsyncSession] | None = None

    async def _open(self) -> None:
        engine = None
        try:
            engine = create_engine(self._database_url, echo=self._echo)
            if self._create_tables:
                async with engine.begin() as conn:
                    await conn.run_sync(BaseModel.metadata.create_all)
        except SQLAlchemyError as e:
            if engine is not None:
                await engine.dispose()
            logger.exception("Could not initialise the database")
            raise StorageError("Could not connect to the database.") from e

        self._engine = engine
        self._session_maker = create_session_maker(engine)
        logger.info("Connected to SQL storage")

    async def _close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None

    async def ping(self) -> None:
        await self.connect()
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.exception("Database ping failed")
            raise StorageError("db error") from e

    async def insert(self, record: RSVPSubmissionDTO) -> str:
        await self.connect()
        row = RSVP(
            name=record.name,
            email=record.email,
            phone=record.phone,
            attending=record.attending,
            guest_count=record.guest_count,
            meal=record.meal,
            allergies=record.allergies,
            message=record.message,
            created_at=record.created_at,
            ip=record.ip,
        )
        try:
            async with async_session_manager(self._session_maker) as session:
                session.add(row)
                await session.flush()
                record_id = row.id
        except SQLAlchemyError as e:
            logger.exception("Failed to insert RSVP")
            raise StorageError("Could not save RSVP.") from e
        return str(record_id)

    async def list(self, limit: int = DEFAULT_LIST_LIMIT) -> list[RSVPRecordDTO]:
        await self.connect()
        stmt = select(RSVP).order_by(RSVP.created_at.desc(), RSVP.id.desc()).limit(limit)
        try:
            async with async_session_manager(self._session_maker, auto_commit=False) as session:
                result = await session.execute(stmt)
                rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.exception("Failed to list RSVPs")
            raise StorageError("Could not load RSVPs.") from e
        return [_to_dto(row) for row in rows]

    async def count(self) -> int:
        await self.connect()
        try:
            async with async_session_manager(self._session_maker, auto_commit=False) as session:
                result = await session.execute(select(func.count()).select_from(RSVP))
                return result.scalar_one()
        except SQLAlchemyError as e:
            logger.exception("Failed to count RSVPs")
            raise StorageError("Could not count RSVPs.") from e
