"""
Event Bus - Central signal hub for inter-module communication.

All modules connect to this single object rather than directly to each other,
enabling loose coupling between the scoreboard session, storage, and GUI.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for YatzyBoard.

    The EventBus acts as a mediator between application components:
    - ScoreboardSession publishes every new board state
    - PersistenceGateway mirrors it to storage
    - GUI components listen and update displays

    Usage:
        # In the application controller
        session.state_changed.connect(self.event_bus.scoreboard_updated.emit)

        # In ScoreboardWidget
        self.event_bus.scoreboard_updated.connect(self._on_scoreboard_updated)
    """

    # ============ Scoreboard Events ============
    scoreboard_updated = Signal(object)     # ScoreboardState
    mode_switched = Signal(str)             # GameMode value
    player_added = Signal(str)              # player_id
    player_removed = Signal(str)            # player_id

    # ============ System Events ============
    storage_error = Signal(str)             # Storage error message
    system_message = Signal(str, str)       # (level, message) - e.g., ("info", "Scores reset")

    def __init__(self):
        super().__init__()

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)
