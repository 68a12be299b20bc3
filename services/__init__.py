"""
YatzyBoard Services

Application services for event handling and persistence.
"""

from services.event_bus import EventBus
from services.storage import KeyValueStore
from services.persistence import PersistenceGateway

__all__ = ["EventBus", "KeyValueStore", "PersistenceGateway"]
