"""
Rule Catalog - Category lists and bonus rules for each game mode.

The mode set is closed, so the catalog is a plain lookup table keyed by
GameMode rather than a class hierarchy.
"""

from dataclasses import dataclass

from models.game_mode import GameMode


# Numeral categories whose sum decides the bonus. Identical in both modes.
UPPER_SECTION: tuple[str, ...] = ("Ones", "Twos", "Threes", "Fours", "Fives", "Sixes")


@dataclass(frozen=True)
class RuleCatalogEntry:
    """Static description of one game mode."""
    title: str
    category_names: tuple[str, ...]
    bonus_threshold: int
    bonus_award: int

    @property
    def category_count(self) -> int:
        return len(self.category_names)


RULE_CATALOG: dict[GameMode, RuleCatalogEntry] = {
    GameMode.CLASSIC: RuleCatalogEntry(
        title="Yahtzee",
        category_names=UPPER_SECTION + (
            "Three of a Kind",
            "Four of a Kind",
            "Full House",
            "Small Straight",
            "Large Straight",
            "Yahtzee",
            "Chance",
        ),
        bonus_threshold=63,
        bonus_award=50,
    ),
    GameMode.MAXI: RuleCatalogEntry(
        title="Maxi Yatzy",
        category_names=UPPER_SECTION + (
            "One Pair",
            "Two Pairs",
            "Three Pairs",
            "Small Straight (1-5)",
            "Large Straight (2-6)",
            "Full Straight (1-6)",
            "House (Full House)",
            "Tower (4 of a kind)",
            "Maxi Yatzy (5 of a kind)",
            "Chance",
        ),
        bonus_threshold=84,
        bonus_award=100,
    ),
}


def rule_for(mode: GameMode) -> RuleCatalogEntry:
    """Get the rule catalog entry for a game mode."""
    return RULE_CATALOG[mode]
