"""
Tests for the scoreboard state model.

Verifies score parsing, roster changes, mode switching and the
scores-match-roster invariant.
"""

import subprocess
import sys
from pathlib import Path

import pytest

from engine import state as board
from engine.rules import rule_for
from models.game_mode import GameMode
from models.scoreboard import Player, ScoreCategory, ScoreboardState


def sequential_ids():
    """Id factory yielding "100", "101", ... for predictable tests."""
    counter = iter(range(100, 10_000))
    return lambda taken: str(next(counter))


def assert_invariant(state):
    roster = set(state.player_ids)
    for category in state.categories:
        assert set(category.scores) == roster


class TestInitialize:
    """Tests for the default board."""

    def test_default_board_is_classic_with_one_player(self):
        state = board.initialize()

        assert state.game_mode == GameMode.CLASSIC
        assert state.players == (Player(id="1", name="Player 1"),)

    def test_categories_follow_the_catalog(self):
        state = board.initialize(GameMode.MAXI)

        assert tuple(c.name for c in state.categories) == rule_for(GameMode.MAXI).category_names
        assert all(c.scores == {"1": 0} for c in state.categories)


class TestParseScore:
    """Tests for raw input parsing."""

    @pytest.mark.parametrize("raw, expected", [
        ("007", 7),
        ("", 0),
        ("abc", 0),
        ("42", 42),
        ("  12 ", 12),
        ("000", 0),
        ("-5", -5),
        ("3.5", 0),
        ("1_000", 0),
        (None, 0),
        (25, 25),
        ("9" * 5000, 0),
    ])
    def test_parse(self, raw, expected):
        assert board.parse_score(raw) == expected


class TestSetScore:
    """Tests for set_score."""

    def setup_method(self):
        self.state = board.initialize()

    def test_leading_zeros_are_stripped(self):
        state = board.set_score(self.state, 0, "1", "007")
        assert state.categories[0].scores["1"] == 7

    def test_empty_input_is_zero(self):
        state = board.set_score(self.state, 0, "1", "12")
        state = board.set_score(state, 0, "1", "")
        assert state.categories[0].scores["1"] == 0

    def test_non_numeric_input_is_zero(self):
        state = board.set_score(self.state, 3, "1", "abc")
        assert state.categories[3].scores["1"] == 0

    def test_input_state_is_untouched(self):
        board.set_score(self.state, 0, "1", "5")
        assert self.state.categories[0].scores["1"] == 0

    def test_oversized_number_is_zero(self):
        state = board.set_score(self.state, 0, "1", "9" * 5000)
        assert state.categories[0].scores["1"] == 0

    def test_unknown_player_raises(self):
        with pytest.raises(KeyError):
            board.set_score(self.state, 0, "nobody", "5")

    def test_out_of_range_category_raises(self):
        with pytest.raises(IndexError):
            board.set_score(self.state, 13, "1", "5")


class TestAddPlayer:
    """Tests for add_player."""

    def test_new_player_is_appended_with_zero_scores(self):
        state = board.add_player(board.initialize(), sequential_ids())

        assert state.players[-1] == Player(id="100", name="Player 2")
        assert all(c.scores["100"] == 0 for c in state.categories)
        assert_invariant(state)

    def test_name_uses_new_player_count(self):
        ids = sequential_ids()
        state = board.initialize()
        for _ in range(3):
            state = board.add_player(state, ids)

        assert [p.name for p in state.players] == [
            "Player 1", "Player 2", "Player 3", "Player 4"
        ]

    def test_existing_scores_are_kept(self):
        state = board.set_score(board.initialize(), 5, "1", "24")
        state = board.add_player(state, sequential_ids())
        assert state.categories[5].scores["1"] == 24

    def test_default_ids_are_unique(self):
        state = board.initialize()
        for _ in range(5):
            state = board.add_player(state)

        assert len(set(state.player_ids)) == 6


class TestPlayerIdGenerator:
    """Tests for time-based ids."""

    def test_ids_are_milliseconds(self):
        generate = board.PlayerIdGenerator(clock=lambda: 1700000000.5)
        assert generate() == "1700000000500"

    def test_stalled_clock_still_gives_increasing_ids(self):
        generate = board.PlayerIdGenerator(clock=lambda: 1.0)
        assert [generate() for _ in range(3)] == ["1000", "1001", "1002"]

    def test_taken_ids_are_skipped(self):
        generate = board.PlayerIdGenerator(clock=lambda: 1.0)
        assert generate(taken=["1000", "1001"]) == "1002"


class TestRemovePlayer:
    """Tests for remove_player."""

    def setup_method(self):
        ids = sequential_ids()
        state = board.initialize()
        state = board.add_player(state, ids)
        self.state = board.add_player(state, ids)

    def test_removal_restores_invariant(self):
        state = board.remove_player(self.state, "100")

        assert state.player_ids == ["1", "101"]
        for category in state.categories:
            assert len(category.scores) == 2
            assert "100" not in category.scores

    def test_last_player_cannot_be_removed(self):
        state = board.set_score(board.initialize(), 2, "1", "9")
        result = board.remove_player(state, "1")

        assert result is state
        assert result.players == (Player(id="1", name="Player 1"),)
        assert result.categories[2].scores == {"1": 9}

    def test_unknown_player_raises(self):
        with pytest.raises(KeyError):
            board.remove_player(self.state, "nobody")


class TestRenamePlayer:
    """Tests for rename_player."""

    def test_rename_changes_only_the_name(self):
        state = board.set_score(board.initialize(), 0, "1", "3")
        renamed = board.rename_player(state, "1", "Alice")

        assert renamed.players[0] == Player(id="1", name="Alice")
        assert renamed.categories == state.categories


class TestSwitchMode:
    """Tests for switch_mode."""

    def test_same_mode_is_a_no_op(self):
        state = board.set_score(board.initialize(), 0, "1", "3")
        assert board.switch_mode(state, GameMode.CLASSIC) is state

    def test_switch_resets_scores(self):
        state = board.add_player(board.initialize(), sequential_ids())
        state = board.set_score(state, 0, "1", "4")
        state = board.set_score(state, 11, "100", "50")

        switched = board.switch_mode(state, GameMode.MAXI)

        assert switched.game_mode == GameMode.MAXI
        assert tuple(c.name for c in switched.categories) == rule_for(GameMode.MAXI).category_names
        assert all(s == 0 for c in switched.categories for s in c.scores.values())
        assert switched.players == state.players
        assert_invariant(switched)


class TestReconcile:
    """Tests for assembling a state from loaded pieces."""

    def test_empty_roster_gets_default_player(self):
        state = board.reconcile(GameMode.CLASSIC, [], [])

        assert state.player_ids == ["1"]
        assert_invariant(state)

    def test_mismatched_categories_are_rebuilt(self):
        players = [Player(id="a", name="A")]
        categories = [ScoreCategory(name="Ones", scores={"a": 3})]

        state = board.reconcile(GameMode.MAXI, players, categories)

        assert len(state.categories) == 16
        assert state.categories[0].scores == {"a": 0}

    def test_scores_are_fitted_to_roster(self):
        players = [Player(id="a", name="A"), Player(id="b", name="B")]
        categories = [
            ScoreCategory(name=name, scores={"a": 2, "ghost": 9})
            for name in rule_for(GameMode.CLASSIC).category_names
        ]

        state = board.reconcile(GameMode.CLASSIC, players, categories)

        assert state.categories[0].scores == {"a": 2, "b": 0}
        assert_invariant(state)

    def test_duplicate_player_ids_are_dropped(self):
        players = [Player(id="a", name="A"), Player(id="a", name="Again")]
        state = board.reconcile(GameMode.CLASSIC, players, [])

        assert state.players == (Player(id="a", name="A"),)


class TestCheckInvariant:

    def test_detects_missing_entry(self):
        state = board.add_player(board.initialize(), sequential_ids())
        broken = ScoreboardState(
            game_mode=state.game_mode,
            players=state.players,
            categories=(ScoreCategory(name="Ones", scores={"1": 0}),),
        )
        with pytest.raises(ValueError, match="do not match roster"):
            board.check_invariant(broken)


class TestEngineImports:
    """The rule and state core loads without Qt."""

    def test_core_modules_do_not_import_qt(self):
        code = (
            "import sys\n"
            "import engine, engine.state, engine.rules, engine.derivation\n"
            "assert 'PySide6' not in sys.modules, sorted(m for m in sys.modules if 'PySide6' in m)\n"
        )
        root = Path(__file__).resolve().parent.parent
        result = subprocess.run(
            [sys.executable, "-c", code], cwd=root, capture_output=True, text=True
        )
        assert result.returncode == 0, result.stderr
