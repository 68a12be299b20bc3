"""
Scoreboard Widget

Score grid showing every category for every player, with the derived
bonus and total rows underneath.
"""

from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QLabel, QFrame, QLineEdit,
    QPushButton, QTableWidget, QTableWidgetItem, QHeaderView
)
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QBrush, QColor

from config import UI_SETTINGS
from engine.derivation import summarize
from engine.rules import UPPER_SECTION, rule_for
from engine.session import ScoreboardSession
from gui.styles.theme import (
    PRIMARY_GOLD, PRIMARY_GREEN, PRIMARY_RED, SURFACE_CARD, SURFACE_ELEVATED,
    TEXT_PRIMARY, TEXT_MUTED, RADIUS_SM, SPACING_SM
)
from models.scoreboard import ScoreboardState


class PlayerStrip(QWidget):
    """
    Row of editable player names with remove buttons.

    Remove buttons are hidden while only one player remains.
    """

    def __init__(self, session: ScoreboardSession, parent=None):
        super().__init__(parent)
        self.session = session
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(SPACING_SM)
        self._player_ids: list[str] = []

    def rebuild(self, state: ScoreboardState) -> None:
        """Recreate the name editors when the roster changes."""
        ids = state.player_ids
        if ids == self._player_ids:
            return
        self._player_ids = ids

        while self._layout.count():
            item = self._layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

        removable = len(state.players) > 1
        for player in state.players:
            self._layout.addWidget(self._create_player_card(player.id, player.name, removable))
        self._layout.addStretch()

    def _create_player_card(self, player_id: str, name: str, removable: bool) -> QFrame:
        """Create a name editor with an optional remove button."""
        frame = QFrame()
        frame.setStyleSheet(f"""
            QFrame {{
                background-color: {SURFACE_CARD};
                border-radius: {RADIUS_SM}px;
            }}
        """)
        layout = QHBoxLayout(frame)
        layout.setContentsMargins(6, 4, 6, 4)

        name_edit = QLineEdit(name)
        name_edit.setObjectName("name")
        name_edit.setFixedWidth(UI_SETTINGS.player_column_width)
        name_edit.textEdited.connect(
            lambda text, pid=player_id: self.session.rename_player(pid, text)
        )
        layout.addWidget(name_edit)

        if removable:
            remove_btn = QPushButton("✕")
            remove_btn.setObjectName("remove")
            remove_btn.setToolTip(f"Remove {name}")
            remove_btn.setFixedWidth(28)
            remove_btn.setStyleSheet(f"color: {PRIMARY_RED}; font-weight: bold;")
            remove_btn.clicked.connect(
                lambda _checked=False, pid=player_id: self.session.remove_player(pid)
            )
            layout.addWidget(remove_btn)

        return frame


class ScoreboardWidget(QWidget):
    """
    Main scoreboard showing:
    - Player names (editable)
    - One row per category with an editable cell per player
    - Bonus row and Total row
    """

    def __init__(self, session: ScoreboardSession, parent=None):
        super().__init__(parent)
        self.session = session
        self._refreshing = False
        self._build_ui()
        self.refresh(session.state)

    def _build_ui(self) -> None:
        """Build the scoreboard UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)

        self.title_label = QLabel()
        self.title_label.setStyleSheet(
            f"font-size: {UI_SETTINGS.title_font_size}pt; font-weight: bold; color: {PRIMARY_GOLD};"
        )
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.title_label)

        self.player_strip = PlayerStrip(self.session)
        layout.addWidget(self.player_strip)

        self.table = QTableWidget()
        self.table.setAlternatingRowColors(False)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.table.verticalHeader().setMinimumWidth(UI_SETTINGS.category_column_width)
        self.table.itemChanged.connect(self._on_item_changed)
        layout.addWidget(self.table, 1)

    @Slot(object)
    def refresh(self, state: ScoreboardState) -> None:
        """Redraw the grid from a ScoreboardState."""
        rules = rule_for(state.game_mode)
        self.title_label.setText(f"{rules.title} Scoreboard")
        self.player_strip.rebuild(state)

        self._refreshing = True
        try:
            category_count = len(state.categories)
            self.table.setRowCount(category_count + 2)
            self.table.setColumnCount(len(state.players))
            self.table.setHorizontalHeaderLabels([p.name for p in state.players])
            self.table.setVerticalHeaderLabels(
                [c.name for c in state.categories]
                + [f"Bonus (if upper ≥ {rules.bonus_threshold})", "Total"]
            )

            for row, category in enumerate(state.categories):
                upper = category.name in UPPER_SECTION
                for col, player in enumerate(state.players):
                    item = self._cell(row, col)
                    item.setText(str(category.score_for(player.id)))
                    item.setFlags(item.flags() | Qt.ItemFlag.ItemIsEditable)
                    item.setForeground(QBrush(QColor(TEXT_PRIMARY)))
                    item.setBackground(QBrush(QColor(SURFACE_ELEVATED if upper else SURFACE_CARD)))

            for col, summary in enumerate(summarize(state)):
                bonus_item = self._derived_cell(category_count, col, str(summary.bonus))
                color = PRIMARY_GREEN if summary.has_bonus else TEXT_MUTED
                bonus_item.setForeground(QBrush(QColor(color)))

                total_item = self._derived_cell(category_count + 1, col, str(summary.total))
                total_item.setForeground(QBrush(QColor(PRIMARY_GOLD)))
        finally:
            self._refreshing = False

    def _cell(self, row: int, col: int) -> QTableWidgetItem:
        """Existing item at row/col, created on first use."""
        item = self.table.item(row, col)
        if item is None:
            item = QTableWidgetItem()
            item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            self.table.setItem(row, col, item)
        return item

    def _derived_cell(self, row: int, col: int, text: str) -> QTableWidgetItem:
        """Read-only cell for bonus and total rows."""
        item = self._cell(row, col)
        item.setText(text)
        item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEditable)
        item.setBackground(QBrush(QColor(SURFACE_ELEVATED)))
        return item

    @Slot(QTableWidgetItem)
    def _on_item_changed(self, item: QTableWidgetItem) -> None:
        """Send edited cells to the session as raw score input."""
        if self._refreshing:
            return
        state = self.session.state
        row, col = item.row(), item.column()
        if row >= len(state.categories) or col >= len(state.players):
            return
        player_id = state.players[col].id
        self.session.set_score(row, player_id, item.text())

        # Show the parsed value ("abc" is stored as 0)
        stored = str(self.session.state.categories[row].score_for(player_id))
        if item.text() != stored:
            self._refreshing = True
            try:
                item.setText(stored)
            finally:
                self._refreshing = False
