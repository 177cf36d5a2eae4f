"""Services package."""

from cinelock.services.actors import BotActor, PrimaryActor, pick_bot_seats
from cinelock.services.catalog import CatalogService
from cinelock.services.event_log import EventLog
from cinelock.services.insight import InsightBoard, InsightService
from cinelock.services.inventory import SeatInventory
from cinelock.services.lock_manager import LockManager

__all__ = [
    "SeatInventory",
    "LockManager",
    "EventLog",
    "PrimaryActor",
    "BotActor",
    "pick_bot_seats",
    "CatalogService",
    "InsightService",
    "InsightBoard",
]
