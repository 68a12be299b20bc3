"""
YatzyBoard Models

Scoreboard dataclasses, validation schemas, and the SQLAlchemy storage model.
"""

from models.base import Base, create_db_engine, get_session, init_db
from models.game_mode import GameMode
from models.scoreboard import Player, ScoreCategory, ScoreboardState, PlayerSummary
from models.schemas import PlayerRecord, CategoryRecord
from models.stored_value import StoredValue

__all__ = [
    "Base",
    "create_db_engine",
    "get_session",
    "init_db",
    "GameMode",
    "Player",
    "ScoreCategory",
    "ScoreboardState",
    "PlayerSummary",
    "PlayerRecord",
    "CategoryRecord",
    "StoredValue",
]
