from .settings import Settings, get_settings
from .database import async_session_manager, create_engine, create_session_maker
from .table_names import TableNames

__all__ = [
    "Settings",
    "get_settings",
    "async_session_manager",
    "create_engine",
    "create_session_maker",
    "TableNames",
]
