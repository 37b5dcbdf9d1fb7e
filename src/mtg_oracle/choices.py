"""Choice-list extraction and keyword / P-T option mapping."""
from __future__ import annotations

import re
from typing import List, Optional, Pattern, Tuple

from .actions import ActionModel, GrantKeywordAction, GrantKeywordChoiceAction, NoteAction, PTModAction
from .lexicon import UNTIL_END_OF_TURN, normalize_minus
from .models import TargetScope

CHOICE_KEYWORDS = (
    "banding",
    "double strike",
    "fear",
    "flying",
    "first strike",
    "haste",
    "provoke",
    "shadow",
    "trample",
)

# (pattern, keyword prefix) for keywords with a numeric parameter.
NUMBERED_KEYWORDS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"^bushido\s+(\d+)$"), "bushido"),
    (re.compile(r"^rampage\s+(\d+)$"), "rampage"),
)
LANDWALK_CHOICE = re.compile(r"^landwalk of your choice$")
PROTECTION_CHOICE = re.compile(r"^protection from a color of your choice$")

OR_SEPARATOR = re.compile(r"\s+or\s+", re.IGNORECASE)
WHITESPACE = re.compile(r"\s+")
COMMA_LIST = re.compile(r"\s*,\s*")

PT_BUFF = re.compile(r"\bgets\s*([+-]?\d+)\s*/\s*([+-]?\d+)", re.IGNORECASE)
PT_SWAP = re.compile(r"\bgets\s*\+(\d+)\s*/\s*-(\d+)\s*or\s*-(\d+)\s*/\s*\+(\d+)", re.IGNORECASE)


def extract_choice_list(text: str, anchor: Pattern[str]) -> Optional[List[str]]:
    """Return the comma/"or" separated options that follow ``anchor``.

    The list ends at "until end of turn" or the first period, whichever comes
    first. ``None`` when the anchor is absent.
    """
    match = anchor.search(text)
    if match is None:
        return None
    after = text[match.end():].strip()

    stops = []
    eot = UNTIL_END_OF_TURN.search(after)
    if eot:
        stops.append(eot.start())
    period = after.find(".")
    if period >= 0:
        stops.append(period)
    span = after[: min(stops)] if stops else after

    normalized = WHITESPACE.sub(" ", OR_SEPARATOR.sub(", ", span)).strip()
    return [part.strip() for part in COMMA_LIST.split(normalized) if part.strip()]


def map_choice_option(
    raw: str,
    target: TargetScope = TargetScope.THIS_CREATURE,
    until_eot: bool = False,
) -> ActionModel:
    """Map one option phrase ("flying", "bushido 2", ...) to an action.

    Unrecognised phrases become a note carrying the original text.
    """
    s = raw.lower()
    if s in CHOICE_KEYWORDS:
        return GrantKeywordAction(keyword=s, target=target, until_eot=until_eot)
    for pattern, prefix in NUMBERED_KEYWORDS:
        match = pattern.match(s)
        if match:
            return GrantKeywordAction(keyword=f"{prefix} {match.group(1)}", target=target, until_eot=until_eot)
    if LANDWALK_CHOICE.match(s):
        return GrantKeywordChoiceAction(keyword="landwalk", param="land_type", target=target, until_eot=until_eot)
    if PROTECTION_CHOICE.match(s):
        return GrantKeywordChoiceAction(keyword="protection", param="color", target=target, until_eot=until_eot)
    return NoteAction(text=raw)


def extract_pt_buff(text: str, target: TargetScope = TargetScope.THIS_CREATURE) -> Optional[PTModAction]:
    match = PT_BUFF.search(normalize_minus(text))
    if match is None:
        return None
    return PTModAction(
        power=int(match.group(1)),
        toughness=int(match.group(2)),
        target=target,
        until_eot=bool(UNTIL_END_OF_TURN.search(text)),
    )


def extract_pt_swap_choices(text: str, until_eot: bool = False) -> Optional[List[PTModAction]]:
    """``gets +A/-B or -C/+D`` -> the two P/T modes, in text order."""
    match = PT_SWAP.search(normalize_minus(text))
    if match is None:
        return None
    a, b, c, d = (int(group) for group in match.groups())
    return [
        PTModAction(power=a, toughness=-b, target=TargetScope.THIS_CREATURE, until_eot=until_eot),
        PTModAction(power=-c, toughness=d, target=TargetScope.THIS_CREATURE, until_eot=until_eot),
    ]


__all__ = [
    "CHOICE_KEYWORDS",
    "extract_choice_list",
    "extract_pt_buff",
    "extract_pt_swap_choices",
    "map_choice_option",
]
