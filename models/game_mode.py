"""
Game modes supported by the scoreboard.
"""

import enum


class GameMode(enum.Enum):
    """The two rulesets the scoreboard can track."""
    CLASSIC = "classic"
    MAXI = "maxi"
