"""
YatzyBoard Application Controller

Top-level controller that wires together all application components.
"""

import logging
from typing import Optional

from PySide6.QtCore import QObject
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from services.event_bus import EventBus
from services.storage import KeyValueStore
from services.persistence import PersistenceGateway
from engine.session import ScoreboardSession
from models.base import create_db_engine


logger = logging.getLogger(__name__)


def open_storage_engine() -> Optional[Engine]:
    """Engine for the user's scoreboard file, or None if it cannot be opened."""
    try:
        return create_db_engine()
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Scoreboard storage unavailable, running in memory: %s", e)
        return None


class YatzyBoardApp(QObject):
    """
    Top-level application controller.
    Wires together all application components.
    """

    def __init__(self, engine: Optional[Engine] = None, with_window: bool = True):
        super().__init__()

        # Core services
        self.event_bus = EventBus()
        self.store = KeyValueStore(engine, on_error=self.event_bus.storage_error.emit)
        self.gateway = PersistenceGateway(self.store)

        # Session starts from whatever storage holds
        self.session = ScoreboardSession(self.gateway.load_state())

        # Write-through: every new state is saved, then broadcast
        self.session.state_changed.connect(self.gateway.save_state)
        self.session.state_changed.connect(self.event_bus.scoreboard_updated.emit)
        self.session.mode_switched.connect(self.event_bus.mode_switched.emit)
        self.session.player_added.connect(self.event_bus.player_added.emit)
        self.session.player_removed.connect(self.event_bus.player_removed.emit)

        self.main_window = None
        if with_window:
            from gui.main_window import MainWindow
            self.main_window = MainWindow(self.event_bus, self.session)

    def show(self) -> None:
        """Show the main application window."""
        if self.main_window is not None:
            self.main_window.show()
