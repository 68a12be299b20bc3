"""
Scoreboard State Model - Commands that transform a ScoreboardState.

Every command returns a new state and leaves its input untouched. The
central invariant is that each category's scores mapping holds exactly
one entry per registered player.
"""

import re
import time
from dataclasses import replace
from typing import Callable, Iterable, Optional

from engine.rules import rule_for
from models.game_mode import GameMode
from models.scoreboard import Player, ScoreCategory, ScoreboardState


DEFAULT_PLAYER_ID = "1"
DEFAULT_PLAYER_NAME = "Player 1"

_INTEGER_RE = re.compile(r"[+-]?\d+")


class PlayerIdGenerator:
    """
    Issues time-based player ids (milliseconds since the epoch).

    When the clock has not advanced since the last id, the previous id is
    bumped by one so ids stay unique and increasing within a session.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def __call__(self, taken: Iterable[str] = ()) -> str:
        taken = set(taken)
        candidate = max(int(self._clock() * 1000), self._last + 1)
        while str(candidate) in taken:
            candidate += 1
        self._last = candidate
        return str(candidate)


_default_id_generator = PlayerIdGenerator()


def build_categories(mode: GameMode, players: Iterable[Player]) -> tuple[ScoreCategory, ...]:
    """Fresh categories for a mode with every player's score at zero."""
    player_ids = [p.id for p in players]
    return tuple(
        ScoreCategory(name=name, scores={pid: 0 for pid in player_ids})
        for name in rule_for(mode).category_names
    )


def initialize(mode: GameMode = GameMode.CLASSIC) -> ScoreboardState:
    """Default scoreboard: one player, all scores zero."""
    players = (Player(id=DEFAULT_PLAYER_ID, name=DEFAULT_PLAYER_NAME),)
    return ScoreboardState(
        game_mode=mode,
        players=players,
        categories=build_categories(mode, players),
    )


def parse_score(raw_input) -> int:
    """
    Parse raw score input into an integer.

    Empty or non-numeric input yields 0. Leading zeros are stripped, so
    "007" is 7.
    """
    if raw_input is None:
        return 0
    if isinstance(raw_input, bool):
        return int(raw_input)
    if isinstance(raw_input, int):
        return raw_input

    text = str(raw_input).strip()
    if not _INTEGER_RE.fullmatch(text):
        return 0

    sign = ""
    if text[0] in "+-":
        sign, text = text[0], text[1:]
    digits = text.lstrip("0")
    if not digits:
        return 0
    try:
        return int(sign + digits)
    except ValueError:
        # Longer than the interpreter will convert
        return 0


def set_score(state: ScoreboardState, category_index: int, player_id: str,
              raw_input) -> ScoreboardState:
    """
    Store a parsed score for one category/player pair.

    Raises:
        IndexError: category_index does not address a category
        KeyError: player_id is not on the roster
    """
    if not 0 <= category_index < len(state.categories):
        raise IndexError(f"No category at index {category_index}")
    state.find_player(player_id)

    category = state.categories[category_index]
    scores = dict(category.scores)
    scores[player_id] = parse_score(raw_input)

    categories = list(state.categories)
    categories[category_index] = replace(category, scores=scores)
    return replace(state, categories=tuple(categories))


def add_player(state: ScoreboardState,
               id_factory: Optional[Callable[[Iterable[str]], str]] = None) -> ScoreboardState:
    """Append a new player with zero scores in every category."""
    id_factory = id_factory or _default_id_generator
    new_id = id_factory(state.player_ids)
    new_player = Player(id=new_id, name=f"Player {len(state.players) + 1}")

    categories = tuple(
        replace(c, scores={**c.scores, new_id: 0})
        for c in state.categories
    )
    return replace(state, players=state.players + (new_player,), categories=categories)


def remove_player(state: ScoreboardState, player_id: str) -> ScoreboardState:
    """
    Remove a player and their scores.

    The last remaining player cannot be removed; the state is returned
    unchanged in that case.
    """
    if len(state.players) <= 1:
        return state
    state.find_player(player_id)

    players = tuple(p for p in state.players if p.id != player_id)
    categories = tuple(
        replace(c, scores={pid: s for pid, s in c.scores.items() if pid != player_id})
        for c in state.categories
    )
    new_state = replace(state, players=players, categories=categories)
    check_invariant(new_state)
    return new_state


def rename_player(state: ScoreboardState, player_id: str, new_name: str) -> ScoreboardState:
    """Change a player's display name."""
    state.find_player(player_id)
    players = tuple(
        replace(p, name=new_name) if p.id == player_id else p
        for p in state.players
    )
    return replace(state, players=players)


def switch_mode(state: ScoreboardState, new_mode: GameMode) -> ScoreboardState:
    """
    Change the game mode.

    Categories are rebuilt from scratch for the new mode, discarding all
    entered scores. Switching to the current mode is a no-op.
    """
    if new_mode == state.game_mode:
        return state
    return ScoreboardState(
        game_mode=new_mode,
        players=state.players,
        categories=build_categories(new_mode, state.players),
    )


def check_invariant(state: ScoreboardState) -> None:
    """Raise ValueError unless every category has exactly one score per player."""
    roster = set(state.player_ids)
    for category in state.categories:
        if set(category.scores) != roster:
            raise ValueError(
                f"Category {category.name!r} scores {sorted(category.scores)} "
                f"do not match roster {sorted(roster)}"
            )


def reconcile(mode: GameMode, players: Iterable[Player],
              categories: Iterable[ScoreCategory]) -> ScoreboardState:
    """
    Assemble a valid state from separately loaded pieces.

    An empty roster becomes the default player. A category list that does
    not match the mode's catalog is rebuilt with zero scores. Otherwise the
    scores are kept, with stray ids dropped and missing ids set to zero.
    """
    players = tuple(players)
    categories = tuple(categories)
    if not players:
        players = initialize(mode).players

    # Duplicate ids would make the scores mapping ambiguous
    seen: set[str] = set()
    unique_players = []
    for player in players:
        if player.id not in seen:
            seen.add(player.id)
            unique_players.append(player)
    players = tuple(unique_players)

    names = tuple(c.name for c in categories)
    if names != rule_for(mode).category_names:
        return ScoreboardState(
            game_mode=mode,
            players=players,
            categories=build_categories(mode, players),
        )

    player_ids = [p.id for p in players]
    categories = tuple(
        replace(c, scores={pid: c.scores.get(pid, 0) for pid in player_ids})
        for c in categories
    )
    return ScoreboardState(game_mode=mode, players=players, categories=categories)
