"""
YatzyBoard Engine

Rule catalog, state model and score derivation for the scoreboard.
Plain Python with no Qt dependency. The Qt-facing ScoreboardSession lives
in engine.session and is imported from there.
"""

from engine.rules import RuleCatalogEntry, RULE_CATALOG, UPPER_SECTION, rule_for
from engine.state import (
    PlayerIdGenerator,
    initialize,
    parse_score,
    set_score,
    add_player,
    remove_player,
    rename_player,
    switch_mode,
    check_invariant,
    reconcile,
)
from engine.derivation import (
    upper_section_total,
    is_bonus_eligible,
    bonus_for,
    total_score,
    summarize,
)

__all__ = [
    "RuleCatalogEntry",
    "RULE_CATALOG",
    "UPPER_SECTION",
    "rule_for",
    "PlayerIdGenerator",
    "initialize",
    "parse_score",
    "set_score",
    "add_player",
    "remove_player",
    "rename_player",
    "switch_mode",
    "check_invariant",
    "reconcile",
    "upper_section_total",
    "is_bonus_eligible",
    "bonus_for",
    "total_score",
    "summarize",
]
