from .settings import settings
from .database import async_session_manager, engine
from .table_names import TableNames

__all__ = [
    "settings",
    "engine",
    "async_session_manager",
    "TableNames",
]
