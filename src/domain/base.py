"""Base class for all table entities"""

from datetime import datetime, timezone
from sqlmodel import SQLModel


def utc_now() -> datetime:
    """Timezone-aware current time for timestamp columns"""
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Common parent so every entity registers on SQLModel.metadata"""

    pass
