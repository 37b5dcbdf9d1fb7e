"""Oracle text analysis for Magic: The Gathering cards."""

from .models import (
    AbilityClause,
    AbilityKind,
    CardDefinition,
    DetectAllResult,
    TargetScope,
    TokenAbilityDefinition,
)
from .actions import Action, ActionModel, action_from_dict, action_to_dict, actions_to_dicts
from .chosen_type import ChosenTypeContext, get_chosen_type, set_chosen_type, with_chosen_type
from .clauses import classify_clause, parse_oracle
from .token_abilities import pair_inline_creation_with_reminder, scan_reminder_token_abilities
from .targets import find_target
from .pattern_matcher import infer_actions_from_text
from .analyzer import CardAnalysis, analyze_card, detect_all
from .renderer import action_lines
from .keywords import extract_innate_keywords
from .card_loader import CardLibrary, load_card_definitions
from .settings import Settings, get_settings

__all__ = [
    "AbilityClause",
    "AbilityKind",
    "CardDefinition",
    "DetectAllResult",
    "TargetScope",
    "TokenAbilityDefinition",
    "Action",
    "ActionModel",
    "action_from_dict",
    "action_to_dict",
    "actions_to_dicts",
    "ChosenTypeContext",
    "get_chosen_type",
    "set_chosen_type",
    "with_chosen_type",
    "classify_clause",
    "parse_oracle",
    "pair_inline_creation_with_reminder",
    "scan_reminder_token_abilities",
    "find_target",
    "infer_actions_from_text",
    "CardAnalysis",
    "analyze_card",
    "detect_all",
    "action_lines",
    "extract_innate_keywords",
    "CardLibrary",
    "load_card_definitions",
    "Settings",
    "get_settings",
]
