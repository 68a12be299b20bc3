"""
Main Window - Scoreboard Console

The single screen of the application: a toolbar for roster and mode
changes above the score grid.
"""

from PySide6.QtWidgets import (
    QMainWindow, QToolBar, QStatusBar, QLabel, QComboBox
)
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QAction, QKeySequence

from config import APP_NAME, UI_SETTINGS
from engine.rules import RULE_CATALOG, rule_for
from engine.session import ScoreboardSession
from models.game_mode import GameMode
from models.scoreboard import ScoreboardState
from services.event_bus import EventBus


class MainWindow(QMainWindow):
    """
    Scoreboard console.

    Provides:
    - Add Player action
    - Game mode selector
    - The score grid
    """

    def __init__(self, event_bus: EventBus, session: ScoreboardSession):
        super().__init__()
        self.event_bus = event_bus
        self.session = session

        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(UI_SETTINGS.min_width, UI_SETTINGS.min_height)

        from gui.widgets.scoreboard import ScoreboardWidget
        self.scoreboard = ScoreboardWidget(session, self)
        self.setCentralWidget(self.scoreboard)

        # Build UI
        self._build_toolbar()
        self._build_statusbar()
        self._connect_signals()

    def _build_toolbar(self) -> None:
        """Build the toolbar."""
        tb = QToolBar("Scoreboard")
        tb.setObjectName("main_toolbar")
        tb.setMovable(False)
        self.addToolBar(Qt.ToolBarArea.TopToolBarArea, tb)

        self.action_add_player = QAction("Add Player", self)
        self.action_add_player.setShortcut(QKeySequence("Ctrl+N"))
        self.action_add_player.triggered.connect(self.session.add_player)
        tb.addAction(self.action_add_player)

        tb.addSeparator()

        tb.addWidget(QLabel(" Game mode: "))
        self.mode_combo = QComboBox()
        for mode, rules in RULE_CATALOG.items():
            self.mode_combo.addItem(rules.title, mode.value)
        self.mode_combo.setCurrentIndex(self.mode_combo.findData(self.session.state.game_mode.value))
        self.mode_combo.currentIndexChanged.connect(self._on_mode_selected)
        tb.addWidget(self.mode_combo)

    def _build_statusbar(self) -> None:
        """Build the status bar."""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready")

        # Permanent widgets
        self.status_players = QLabel()
        self.status_bar.addPermanentWidget(self.status_players)
        self._update_player_count(self.session.state)

    def _connect_signals(self) -> None:
        """Connect event bus signals."""
        self.event_bus.scoreboard_updated.connect(self.scoreboard.refresh)
        self.event_bus.scoreboard_updated.connect(self._update_player_count)
        self.event_bus.mode_switched.connect(self._on_mode_switched)
        self.event_bus.player_added.connect(self._on_player_added)
        self.event_bus.player_removed.connect(self._on_player_removed)
        self.event_bus.storage_error.connect(self._on_storage_error)
        self.event_bus.system_message.connect(self._on_system_message)

    @Slot(int)
    def _on_mode_selected(self, index: int) -> None:
        """Apply the mode picked in the combo box."""
        value = self.mode_combo.itemData(index)
        if value:
            self.session.switch_mode(GameMode(value))

    @Slot(str)
    def _on_mode_switched(self, mode_value: str) -> None:
        """Report the score reset that comes with a mode switch."""
        rules = rule_for(GameMode(mode_value))
        self.event_bus.emit_message("info", f"Switched to {rules.title}; scores reset")

    @Slot(str)
    def _on_player_added(self, player_id: str) -> None:
        name = self.session.state.find_player(player_id).name
        self.event_bus.emit_message("info", f"Added {name}")

    @Slot(str)
    def _on_player_removed(self, player_id: str) -> None:
        self.event_bus.emit_message("info", "Player removed")

    @Slot(object)
    def _update_player_count(self, state: ScoreboardState) -> None:
        count = len(state.players)
        self.status_players.setText(f"{count} player{'s' if count != 1 else ''}")

    @Slot(str)
    def _on_storage_error(self, message: str) -> None:
        self.status_bar.showMessage(f"[WARNING] {message}", UI_SETTINGS.status_timeout_ms)

    @Slot(str, str)
    def _on_system_message(self, level: str, message: str) -> None:
        """Display system message in status bar."""
        self.status_bar.showMessage(f"[{level.upper()}] {message}", UI_SETTINGS.status_timeout_ms)
