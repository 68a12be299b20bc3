"""
Score Derivation - Bonus and total calculations.

Read-only functions over a ScoreboardState. Missing score entries count
as zero.
"""

from engine.rules import UPPER_SECTION, rule_for
from models.scoreboard import ScoreboardState, PlayerSummary


def upper_section_total(state: ScoreboardState, player_id: str) -> int:
    """Sum of a player's scores in the six numeral categories."""
    return sum(
        category.score_for(player_id)
        for category in state.categories
        if category.name in UPPER_SECTION
    )


def is_bonus_eligible(state: ScoreboardState, player_id: str) -> bool:
    """Whether the upper section meets the active mode's bonus threshold."""
    threshold = rule_for(state.game_mode).bonus_threshold
    return upper_section_total(state, player_id) >= threshold


def bonus_for(state: ScoreboardState, player_id: str) -> int:
    """The bonus a player has earned: the mode's award or 0."""
    if is_bonus_eligible(state, player_id):
        return rule_for(state.game_mode).bonus_award
    return 0


def total_score(state: ScoreboardState, player_id: str) -> int:
    """Sum of all category scores plus the bonus, if earned."""
    base = sum(category.score_for(player_id) for category in state.categories)
    return base + bonus_for(state, player_id)


def summarize(state: ScoreboardState) -> list[PlayerSummary]:
    """Derived values for every player, in roster order."""
    return [
        PlayerSummary(
            player_id=player.id,
            name=player.name,
            upper_total=upper_section_total(state, player.id),
            bonus=bonus_for(state, player.id),
            total=total_score(state, player.id),
        )
        for player in state.players
    ]
