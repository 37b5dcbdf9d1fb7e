"""Core datamodels for oracle text analysis."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple


class AbilityKind(str, Enum):
    """Enumeration of ability clause kinds recognised by the classifier."""

    ACTIVATED = "activated"
    TRIGGERED = "triggered"
    STATIC = "static"


class TargetScope(str, Enum):
    """Recipient tags an action can be aimed at."""

    THIS_CREATURE = "this_creature"
    EACH_OPPONENT = "each_opponent"
    EACH_PLAYER = "each_player"
    ANY_TARGETS = "any_targets"
    UP_TO_TARGETS = "up_to_targets"
    ANOTHER_TARGET_CREATURE_YOU_CONTROL = "another_target_creature_you_control"
    TARGET_CREATURE_YOU_CONTROL = "target_creature_you_control"
    CREATURE_YOU_CONTROL = "creature_you_control"
    CREATURE_OPPONENT_CONTROLS = "creature_opponent_controls"
    TARGET_CREATURE = "target_creature"
    TARGET_PLAYER = "target_player"
    YOU = "you"
    OPPONENT = "opponent"
    UNSPECIFIED = "unspecified"
    # Only produced by specific detectors, never by the resolver.
    ANY_TARGET = "any_target"
    OPPONENT_OR_TARGET = "opponent_or_target"
    TWO_CREATURES_SELECTED = "two_creatures_selected"
    YOUR_OTHER_CREATURES_OF_CHOSEN_TYPE = "your_other_creatures_of_chosen_type"


@dataclass(frozen=True, slots=True)
class AbilityClause:
    """One classified clause of oracle text.

    ``cost`` is only set when ``raw`` contains a colon. ``chain`` holds the
    continuation clauses grouped under an activated or triggered head, and
    ``trigger`` the condition split off a triggered clause.
    """

    kind: AbilityKind
    raw: str
    cost: Optional[str]
    effect: str
    chain: Tuple[str, ...] = ()
    trigger: Optional[str] = None

    @property
    def is_ability(self) -> bool:
        return self.kind in (AbilityKind.ACTIVATED, AbilityKind.TRIGGERED)

    def without_chain(self) -> "AbilityClause":
        return replace(self, chain=())

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {
            "type": self.kind.value,
            "raw": self.raw,
            "cost": self.cost,
            "effect": self.effect,
        }
        if self.chain:
            data["chain"] = list(self.chain)
        if self.trigger is not None:
            data["trigger"] = self.trigger
        return data


@dataclass(frozen=True, slots=True)
class TokenAbilityDefinition:
    """Ability granted to a token by reminder text, e.g. a Clue's draw ability."""

    token: str
    cost: str
    effect: str

    @property
    def key(self) -> str:
        return self.token.lower()

    def to_dict(self) -> Dict[str, str]:
        return {"token": self.token, "cost": self.cost, "effect": self.effect}


@dataclass(frozen=True, slots=True)
class DetectAllResult:
    """Per-card bundle produced by :func:`mtg_oracle.analyzer.detect_all`."""

    abilities: List[AbilityClause] = field(default_factory=list)
    expanded_abilities: List[AbilityClause] = field(default_factory=list)
    abilities_only: List[AbilityClause] = field(default_factory=list)
    innate_tokens: List[TokenAbilityDefinition] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[Dict[str, object]]]:
        """Produce a serialisable snapshot using the wire key names."""

        return {
            "abilities": [ability.to_dict() for ability in self.abilities],
            "expandedAbilities": [ability.to_dict() for ability in self.expanded_abilities],
            "abilitiesOnly": [ability.to_dict() for ability in self.abilities_only],
            "innateTokens": [token.to_dict() for token in self.innate_tokens],
        }


@dataclass(slots=True)
class CardDefinition:
    """Static card information as supplied by a card database dump."""

    name: str
    oracle_text: Optional[str] = None
    type_line: Optional[str] = None
    mana_cost: Optional[str] = None
    faces: List[Dict[str, object]] = field(default_factory=list)


__all__ = [
    "AbilityClause",
    "AbilityKind",
    "CardDefinition",
    "DetectAllResult",
    "TargetScope",
    "TokenAbilityDefinition",
]
