"""
Scoreboard data model: players, score categories, and the board itself.

These are plain dataclasses. The engine functions never mutate them in
place; every command returns a new ScoreboardState.
"""

from dataclasses import dataclass, field

from models.game_mode import GameMode


@dataclass(frozen=True)
class Player:
    """A player on the scoreboard."""
    id: str
    name: str


@dataclass(frozen=True)
class ScoreCategory:
    """
    One scoring line (e.g. "Full House") holding a raw score per player.

    The scores mapping always has exactly one entry per registered player.
    """
    name: str
    scores: dict[str, int] = field(default_factory=dict)

    def score_for(self, player_id: str) -> int:
        """Score for a player, 0 when no entry exists."""
        return self.scores.get(player_id, 0)


@dataclass(frozen=True)
class ScoreboardState:
    """Complete scoreboard: active mode, roster and category matrix."""
    game_mode: GameMode
    players: tuple[Player, ...]
    categories: tuple[ScoreCategory, ...]

    @property
    def player_ids(self) -> list[str]:
        return [p.id for p in self.players]

    def find_player(self, player_id: str) -> Player:
        """Return the player with the given id, raising KeyError if unknown."""
        for player in self.players:
            if player.id == player_id:
                return player
        raise KeyError(player_id)


@dataclass(frozen=True)
class PlayerSummary:
    """
    Snapshot of a player's derived values.
    Handed to the presentation layer for the bonus and total rows.
    """
    player_id: str
    name: str
    upper_total: int
    bonus: int
    total: int

    @property
    def has_bonus(self) -> bool:
        return self.bonus > 0
