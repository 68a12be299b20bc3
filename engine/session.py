"""
Scoreboard Session - The single writer of scoreboard state.

The session owns the current ScoreboardState, applies user commands to it
and emits Qt Signals so the GUI and the persistence gateway can react
without polling.
"""

from typing import Callable, Iterable, Optional

from PySide6.QtCore import QObject, Signal

from engine import state as board
from engine.derivation import summarize
from engine.rules import RuleCatalogEntry, rule_for
from models.game_mode import GameMode
from models.scoreboard import ScoreboardState, PlayerSummary


class ScoreboardSession(QObject):
    """
    Applies commands to the scoreboard one at a time.

    This session does NOT handle persistence - listeners connected to
    state_changed mirror each new state to storage.
    """

    # Signals
    state_changed = Signal(object)          # ScoreboardState
    mode_switched = Signal(str)             # new GameMode value
    player_added = Signal(str)              # player_id
    player_removed = Signal(str)            # player_id

    def __init__(self, initial_state: Optional[ScoreboardState] = None,
                 id_factory: Optional[Callable[[Iterable[str]], str]] = None):
        """
        Initialize the session.

        Args:
            initial_state: State loaded from storage; defaults to a fresh
                classic board
            id_factory: Player id source, mainly for tests
        """
        super().__init__()
        self._state = initial_state or board.initialize(GameMode.CLASSIC)
        self._id_factory = id_factory

    @property
    def state(self) -> ScoreboardState:
        """Current scoreboard state."""
        return self._state

    @property
    def rules(self) -> RuleCatalogEntry:
        """Rule catalog entry for the active mode."""
        return rule_for(self._state.game_mode)

    @property
    def can_remove_players(self) -> bool:
        return len(self._state.players) > 1

    # ============ Commands ============

    def set_score(self, category_index: int, player_id: str, raw_input) -> None:
        """Record raw score input for a category/player pair."""
        self._apply(board.set_score(self._state, category_index, player_id, raw_input))

    def add_player(self) -> str:
        """Add a player and return the new id."""
        new_state = board.add_player(self._state, self._id_factory)
        player_id = new_state.players[-1].id
        self._apply(new_state)
        self.player_added.emit(player_id)
        return player_id

    def remove_player(self, player_id: str) -> bool:
        """
        Remove a player.

        Returns:
            False when the player is the last one and was kept
        """
        new_state = board.remove_player(self._state, player_id)
        if new_state is self._state:
            return False
        self._apply(new_state)
        self.player_removed.emit(player_id)
        return True

    def rename_player(self, player_id: str, new_name: str) -> None:
        """Change a player's display name."""
        self._apply(board.rename_player(self._state, player_id, new_name))

    def switch_mode(self, new_mode: GameMode) -> None:
        """Switch rulesets. All entered scores are discarded."""
        new_state = board.switch_mode(self._state, new_mode)
        if new_state is self._state:
            return
        self._apply(new_state)
        self.mode_switched.emit(new_mode.value)

    # ============ Queries ============

    def summaries(self) -> list[PlayerSummary]:
        """Bonus and total for every player."""
        return summarize(self._state)

    def _apply(self, new_state: ScoreboardState) -> None:
        """Replace the current state and notify listeners if it changed."""
        if new_state == self._state:
            return
        self._state = new_state
        self.state_changed.emit(new_state)
