"""
YatzyBoard GUI Widgets

Widget components for the scoreboard console.
"""

from gui.widgets.scoreboard import ScoreboardWidget, PlayerStrip

__all__ = ["ScoreboardWidget", "PlayerStrip"]
