"""
Integration tests for the application controller wiring.

Runs without a window: commands go to the session, and storage and the
event bus should see every change.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.pool import StaticPool

from app import YatzyBoardApp
from engine.derivation import total_score
from models.base import create_db_engine
from models.game_mode import GameMode


@pytest.fixture()
def db_engine():
    engine = create_db_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    yield engine
    engine.dispose()


class TestWriteThrough:
    """Every mutation is mirrored to storage."""

    def test_scores_survive_restart(self, db_engine):
        first = YatzyBoardApp(db_engine, with_window=False)
        first.session.set_score(5, "1", "66")

        second = YatzyBoardApp(db_engine, with_window=False)

        assert second.session.state == first.session.state
        assert total_score(second.session.state, "1") == 116

    def test_mode_and_roster_survive_restart(self, db_engine):
        first = YatzyBoardApp(db_engine, with_window=False)
        player_id = first.session.add_player()
        first.session.rename_player(player_id, "Bea")
        first.session.switch_mode(GameMode.MAXI)

        restored = YatzyBoardApp(db_engine, with_window=False).session.state

        assert restored.game_mode == GameMode.MAXI
        assert [p.name for p in restored.players] == ["Player 1", "Bea"]
        assert len(restored.categories) == 16

    def test_runs_without_storage(self):
        board_app = YatzyBoardApp(None, with_window=False)
        board_app.session.set_score(0, "1", "3")

        assert board_app.session.state.categories[0].scores["1"] == 3


class TestEventBusForwarding:
    """Session signals reach the event bus."""

    def test_session_signals_are_forwarded(self, db_engine):
        board_app = YatzyBoardApp(db_engine, with_window=False)
        updated = MagicMock()
        switched = MagicMock()
        board_app.event_bus.scoreboard_updated.connect(updated)
        board_app.event_bus.mode_switched.connect(switched)

        board_app.session.switch_mode(GameMode.MAXI)

        updated.assert_called_once_with(board_app.session.state)
        switched.assert_called_once_with("maxi")
