"""Simulation log entry model."""

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class LogKind(str, enum.Enum):
    """Kind of a simulation log entry."""

    INFO = "INFO"
    DB_LOCK = "DB_LOCK"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    DEADLOCK = "DEADLOCK"


class LogEntry(BaseModel):
    """Immutable record of a state transition or simulated DB operation."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    kind: LogKind
    message: str
    query: str | None = None
