from src.config.settings import Settings
from src.rsvps.repository.base import DEFAULT_LIST_LIMIT, RSVPStorage
from src.rsvps.repository.mongo_storage import MongoRSVPStorage
from src.rsvps.repository.sql_storage import SqlRSVPStorage


def create_storage(settings: Settings) -> RSVPStorage:
    if settings.uses_mongo:
        return MongoRSVPStorage(uri=settings.database_url, db_name=settings.mongodb_db)
    return SqlRSVPStorage(
        database_url=settings.database_url,
        echo=settings.LOG_DB,
        create_tables=settings.create_tables_on_startup,
    )


__all__ = [
    "DEFAULT_LIST_LIMIT",
    "MongoRSVPStorage",
    "RSVPStorage",
    "SqlRSVPStorage",
    "create_storage",
]
