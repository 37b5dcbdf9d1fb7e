"""Card-level aggregation: clauses, expanded abilities, token abilities and actions."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .actions import ActionModel, actions_to_dicts
from .clauses import parse_oracle
from .keywords import extract_innate_keywords
from .models import AbilityClause, CardDefinition, DetectAllResult
from .pattern_matcher import infer_actions_from_text
from .settings import Settings, bound_text
from .token_abilities import dedupe_by_token, pair_inline_creation_with_reminder, scan_reminder_token_abilities

logger = logging.getLogger(__name__)


def expand_abilities(abilities: List[AbilityClause]) -> List[AbilityClause]:
    """Flatten chains: each head loses its chain and each step follows as a sibling."""
    expanded: List[AbilityClause] = []
    for ability in abilities:
        if not ability.is_ability:
            expanded.append(ability)
            continue
        expanded.append(ability.without_chain())
        for step in ability.chain:
            expanded.append(AbilityClause(kind=ability.kind, raw=step, cost=None, effect=step))
    return expanded


def detect_all(text: Optional[str], settings: Optional[Settings] = None) -> DetectAllResult:
    """Run every text-level detector over one oracle text.

    Args:
        text: Full oracle text, reminder text included.
        settings: Optional settings; the process settings when omitted.

    Returns:
        A fresh :class:`DetectAllResult`; all four lists are empty for
        empty input.
    """
    if not text or not isinstance(text, str):
        return DetectAllResult()

    text = bound_text(text, settings)
    abilities = parse_oracle(text, settings)
    expanded = expand_abilities(abilities)
    abilities_only = [ability for ability in expanded if ability.is_ability]
    innate_tokens = dedupe_by_token(
        scan_reminder_token_abilities(text, settings) + pair_inline_creation_with_reminder(text, settings)
    )
    return DetectAllResult(
        abilities=abilities,
        expanded_abilities=expanded,
        abilities_only=abilities_only,
        innate_tokens=innate_tokens,
    )


@dataclass
class AbilityActions:
    """Actions inferred for one activated or triggered ability."""

    ability: AbilityClause
    actions: List[ActionModel] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"ability": self.ability.to_dict(), "actions": actions_to_dicts(self.actions)}


@dataclass
class CardAnalysis:
    """Everything the analyzer knows about one card."""

    card_name: str
    detection: DetectAllResult
    ability_actions: List[AbilityActions] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "card_name": self.card_name,
            "detection": self.detection.to_dict(),
            "ability_actions": [entry.to_dict() for entry in self.ability_actions],
            "keywords": list(self.keywords),
        }


def analyze_card(card: CardDefinition, settings: Optional[Settings] = None) -> CardAnalysis:
    """Detect abilities of ``card`` and infer actions for each of them."""
    logger.info(f"[CardAnalysis] Analyzing card: {card.name}")
    detection = detect_all(card.oracle_text, settings)
    ability_actions = [
        AbilityActions(ability=ability, actions=infer_actions_from_text(ability.effect, settings))
        for ability in detection.abilities_only
    ]
    analysis = CardAnalysis(
        card_name=card.name,
        detection=detection,
        ability_actions=ability_actions,
        keywords=extract_innate_keywords(card.oracle_text, settings),
    )
    logger.info(
        f"[CardAnalysis] Done: {len(detection.abilities)} clauses, "
        f"{len(ability_actions)} abilities, {len(detection.innate_tokens)} token abilities"
    )
    for entry in ability_actions:
        kinds = ", ".join(action.kind for action in entry.actions)
        logger.info(f"  - {entry.ability.kind.value}: {kinds}")
    return analysis


__all__ = ["AbilityActions", "CardAnalysis", "analyze_card", "detect_all", "expand_abilities"]
