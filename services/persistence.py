"""
Persistence Gateway - Mirrors the scoreboard to the key-value store.

The board is stored under three keys: game mode, players and categories.
Startup loads them in that order because the default categories depend on
the resolved mode.
"""

import logging

from config import STORAGE_KEYS, StorageKeys
from engine.state import build_categories, initialize, reconcile
from models.game_mode import GameMode
from models.scoreboard import ScoreboardState
from models.schemas import (
    CategoryRecord,
    PlayerRecord,
    GAME_MODE,
    PLAYER_LIST,
    CATEGORY_LIST,
)
from services.storage import KeyValueStore


logger = logging.getLogger(__name__)


class PersistenceGateway:
    """Loads the scoreboard at startup and saves it after every change."""

    def __init__(self, store: KeyValueStore, keys: StorageKeys = STORAGE_KEYS):
        self.store = store
        self.keys = keys

    def load_state(self) -> ScoreboardState:
        """
        Build the startup state from storage.

        Any value that is missing or invalid falls back to the default
        board for the loaded mode.
        """
        mode = self.store.load(self.keys.game_mode, GameMode.CLASSIC, GAME_MODE)
        defaults = initialize(mode)

        player_records = self.store.load(self.keys.players, None, PLAYER_LIST)
        if player_records is None:
            players = defaults.players
        else:
            players = tuple(r.to_player() for r in player_records)

        category_records = self.store.load(self.keys.categories, None, CATEGORY_LIST)
        if category_records is None:
            categories = build_categories(mode, players)
        else:
            categories = tuple(r.to_category() for r in category_records)

        state = reconcile(mode, players, categories)
        logger.info(
            "Loaded %s board with %d player(s)", state.game_mode.value, len(state.players)
        )
        return state

    def save_state(self, state: ScoreboardState) -> None:
        """Write all three keys for the given state."""
        self.store.save(self.keys.game_mode, state.game_mode.value)
        self.store.save(
            self.keys.players,
            [PlayerRecord.from_player(p).model_dump() for p in state.players],
        )
        self.store.save(
            self.keys.categories,
            [CategoryRecord.from_category(c).model_dump() for c in state.categories],
        )
