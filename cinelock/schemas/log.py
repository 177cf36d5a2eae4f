"""Log schemas."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from cinelock.models.log import LogKind
from cinelock.schemas.common import BaseSchema


class LogEntryResponse(BaseSchema):
    """Schema for a simulation log entry."""

    timestamp: datetime
    kind: LogKind
    message: str
    query: str | None = None


class WSMessageType(str, Enum):
    """WebSocket message types."""

    BACKLOG = "backlog"
    LOG_ENTRY = "log_entry"
    PONG = "pong"
    KEEPALIVE = "keepalive"


class WSMessage(BaseSchema):
    """WebSocket message."""

    type: WSMessageType
    data: dict | list = {}
    timestamp: datetime = Field(default_factory=datetime.now)
