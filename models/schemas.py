"""
Pydantic schemas for data validation.

Persisted scoreboard values are validated against these before being
turned back into model objects.
"""

from pydantic import BaseModel, Field, TypeAdapter

from models.game_mode import GameMode
from models.scoreboard import Player, ScoreCategory


# ============ Player Schemas ============

class PlayerRecord(BaseModel):
    """Stored form of a player."""
    id: str = Field(..., min_length=1)
    name: str

    @classmethod
    def from_player(cls, player: Player) -> "PlayerRecord":
        return cls(id=player.id, name=player.name)

    def to_player(self) -> Player:
        return Player(id=self.id, name=self.name)


# ============ Category Schemas ============

class CategoryRecord(BaseModel):
    """Stored form of a score category."""
    name: str
    scores: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_category(cls, category: ScoreCategory) -> "CategoryRecord":
        return cls(name=category.name, scores=dict(category.scores))

    def to_category(self) -> ScoreCategory:
        return ScoreCategory(name=self.name, scores=dict(self.scores))


GAME_MODE = TypeAdapter(GameMode)
PLAYER_LIST = TypeAdapter(list[PlayerRecord])
CATEGORY_LIST = TypeAdapter(list[CategoryRecord])
