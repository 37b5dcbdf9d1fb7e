"""Pattern matcher that infers typed game actions from an effect string."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional

from .actions import (
    ActionModel,
    AddManaAction,
    ChoiceAction,
    CreateTokensAction,
    DealDamageAction,
    DestroyAction,
    DiscardCardsAction,
    DrawCardsAction,
    ExileAction,
    FightAction,
    GainControlAction,
    GainLifeAction,
    GrantKeywordAction,
    GrantKeywordChoiceAction,
    LoseLifeAction,
    MillCardsAction,
    NoteAction,
    OpenZoneFilterAction,
    PTModAction,
    PutCountersAction,
    ReanimateAction,
    ReturnToHandAction,
    SacrificeAction,
    ScryAction,
    SearchLibraryAction,
    SetColorChoiceAction,
    SetTypeChoiceAction,
    SurveilAction,
    TapAction,
    UntapAction,
)
from .chosen_type import CHOSEN_TYPE_PLACEHOLDER
from .choices import extract_choice_list, extract_pt_buff, extract_pt_swap_choices, map_choice_option
from .lexicon import NUMBER_TOKEN, amount_from_token, extract_number_after, has_until_end_of_turn, strip_reminder
from .models import TargetScope
from .settings import Settings, bound_text
from .targets import find_target, scope_or
from .token_abilities import MAX_NAME_WORDS, MAX_PHRASE_SPAN

logger = logging.getLogger(__name__)

REMINDER_NOTE = "(reminder text)"
UNRECOGNIZED_NOTE = "No concrete action recognized. Review manually."
PROTECTION_COLORS = ("white", "blue", "black", "red", "green")
MANA_COLORS = ("W", "U", "B", "R", "G")

_ZONES = r"(library|deck|graveyard|exile|hand)"
_ZONE_PART = rf"{_ZONES}(?:\s+and/or\s+{_ZONES})?"
_SEARCH_BOUNDARY = r"(?:\.|,|;|\bthen\b|\band\b|\bwhere\b|\breveal\b|\bshuffle\b|$)"
_COUNTER_NAME = rf"[A-Za-z][A-Za-z+/-]*(?:\s+[A-Za-z][A-Za-z+/-]*){{0,{MAX_NAME_WORDS - 1}}}"
_SPAN = rf"[^.]{{0,{MAX_PHRASE_SPAN}}}?"


class ActionPatterns:
    """Compiled patterns for every action family, grouped by detector."""

    # Choices
    CHOOSE_CREATURE_TYPE = re.compile(r"\bchoose a creature type\b", re.IGNORECASE)
    INVESTIGATE = re.compile(r"\binvestigate\b", re.IGNORECASE)
    PROTECTION_COLORLESS = re.compile(r"\bgains?\s+protection\s+from\s+colorless\b", re.IGNORECASE)
    PROTECTION_COLOR_CHOICE = re.compile(
        r"\bprotection\s+from\s+(?:a|the)\s+color\s+of\s+your\s+choice\b"
        r"|\bfrom\s+the\s+color\s+of\s+your\s+choice\b",
        re.IGNORECASE,
    )
    GAINS_CHOICE_OF = re.compile(r"\bgains?\s+your choice of\s+", re.IGNORECASE)
    ANY_COLOR_MANA = re.compile(r"\badd\s+(?:one|1)\s+mana\s+of\s+any\s+(?:one\s+)?color\b", re.IGNORECASE)
    BECOMES_COLOR_CHOICE = re.compile(r"\bbecomes the colors? of your choice\b", re.IGNORECASE)
    BECOMES_TYPE_CHOICE = re.compile(r"\bbecomes the creature type of your choice\b", re.IGNORECASE)
    TOKEN_CHOICE = re.compile(
        rf"\bcreate\b{_SPAN}\b(\w+)\s+token\b{_SPAN}\bor\b{_SPAN}\b(\w+)\s+token\b",
        re.IGNORECASE,
    )

    # Chosen creature type
    CHOSEN_TYPE_MEMBER = re.compile(r"^this creature is the chosen type in addition to its other types", re.IGNORECASE)
    CHOSEN_TYPE_LORD = re.compile(
        r"other creatures you control of the chosen type get\s*\+(\d+)\s*/\s*\+(\d+)",
        re.IGNORECASE,
    )

    # Life, cards, damage
    GAIN_LIFE = re.compile(r"\bgain life\b", re.IGNORECASE)
    LIFE = re.compile(r"\blife\b", re.IGNORECASE)
    DRAW_A_CARD = re.compile(r"\bdraw (a|one) card\b", re.IGNORECASE)
    DISCARD_A_CARD = re.compile(r"\bdiscard a card\b", re.IGNORECASE)
    MILL_A_CARD = re.compile(r"\bmill a card\b", re.IGNORECASE)
    DEAL_DAMAGE = re.compile(rf"\bdeal(?:s)?\s+({NUMBER_TOKEN})\s+damage\b", re.IGNORECASE)
    ANY_TARGET = re.compile(r"\bany target\b", re.IGNORECASE)

    # Counters
    PLUS_ONE_COUNTER = re.compile(r"(?<![\w+])\+1/\+1 counters?\b", re.IGNORECASE)
    LOYALTY_COUNTER = re.compile(r"\bloyalty counters?\b", re.IGNORECASE)
    RESERVED_COUNTER = re.compile(r"\+1/\+1|loyalty", re.IGNORECASE)
    NAMED_COUNTER_WORD = re.compile(
        rf"\bput\b{_SPAN}\b(?:X|a|an|one|1|\d+)?\s*([A-Za-z+/-]+)\s+counter\b",
        re.IGNORECASE,
    )
    NAMED_COUNTER_PHRASE = re.compile(
        rf"\bput\b{_SPAN}\b(?:X|a|an|one|1|\d+)?\s*({_COUNTER_NAME})\s+counters?\b",
        re.IGNORECASE,
    )
    COUNTERS_WITH = re.compile(
        rf"\bwith\b\s+(X|a|an|one|1|\d+)?\s*({_COUNTER_NAME})\s+counters?\s+on\b",
        re.IGNORECASE,
    )
    UNNAMED_COUNTERS = re.compile(r"\b(counter|counters) on (?:it|this|that|enchanted|equipped|target)\b", re.IGNORECASE)

    # Tokens and mana
    CREATE = re.compile(r"\bcreate\b", re.IGNORECASE)
    TOKEN = re.compile(r"\btoken\b", re.IGNORECASE)
    CREATED_TOKEN_NAME = re.compile(
        rf"\bcreate\b{_SPAN}\b(?:a|an|one|1|\d+|X)?\s*([A-Z][a-zA-Z-]*(?:\s+[A-Z][a-zA-Z-]*){{0,{MAX_NAME_WORDS - 1}}})\s+token(?:s)?\b",
        re.IGNORECASE,
    )
    LEADING_COUNT = re.compile(rf"^(?:{NUMBER_TOKEN})\s+", re.IGNORECASE)
    UNTAP = re.compile(r"\buntap\b", re.IGNORECASE)
    TAP = re.compile(r"\btap target\b|\btap (?:up to|any number of|a|one)\b", re.IGNORECASE)
    ADD = re.compile(r"\badd\b", re.IGNORECASE)
    MANA_SYMBOL = re.compile(r"\{[WUBRGCSX0-9/]+\}", re.IGNORECASE)
    ANY_SYMBOL = re.compile(r"\{([^}]+)\}")

    # Searching zones
    SEARCH_LIBRARY = re.compile(r"\bsearch your library\b", re.IGNORECASE)
    SEARCH_ZONE = re.compile(rf"\bsearch\s+your\s+{_ZONES}\b", re.IGNORECASE)
    SEARCH_NAMED_CARD = re.compile(
        rf"\bsearch\s+your\s+{_ZONE_PART}[^.]*?\bfor\b\s+a\s+card\s+named\s+([\s\S]+?)\s*(?={_SEARCH_BOUNDARY})",
        re.IGNORECASE,
    )
    SEARCH_FOR_PHRASE = re.compile(
        rf"\bsearch\s+your\s+{_ZONE_PART}[^.]*?\bfor\b\s+([\s\S]+?)\s*(?={_SEARCH_BOUNDARY})",
        re.IGNORECASE,
    )
    GENERIC_CARD_PHRASE = re.compile(r"^(?:a|an|any)?\s*cards?\b", re.IGNORECASE)
    TRAILING_CLAUSE = re.compile(r"\s+(?:then|and|where|reveal|shuffle)\b[\s\S]*$", re.IGNORECASE)
    TRAILING_PUNCTUATION = re.compile(r"[.,;]\s*$")

    # Removal and interaction
    RETURN_TO_HAND = re.compile(r"\breturn target .* to (?:its|their) owner'?s hand\b", re.IGNORECASE)
    REANIMATE = re.compile(r"\breturn target .* from your graveyard to the battlefield\b", re.IGNORECASE)
    EXILE_TARGET = re.compile(r"\bexile target\b", re.IGNORECASE)
    SACRIFICE = re.compile(r"\bsacrifice (?:a|one|\d+)\b", re.IGNORECASE)
    DESTROY_TARGET = re.compile(r"\bdestroy target\b", re.IGNORECASE)
    GAIN_CONTROL = re.compile(r"\bgain control of\b", re.IGNORECASE)
    FIGHT = re.compile(r"\bfight\b", re.IGNORECASE)


P = ActionPatterns


@dataclass(frozen=True)
class InferenceContext:
    """Values computed once per effect string and shared by every detector."""

    text: str
    scope: TargetScope
    until_eot: bool
    token_choice: Optional[re.Match]

    @classmethod
    def from_text(cls, text: str) -> "InferenceContext":
        return cls(
            text=text,
            scope=find_target(text),
            until_eot=has_until_end_of_turn(text),
            token_choice=P.TOKEN_CHOICE.search(text),
        )


DetectorFn = Callable[[InferenceContext], List[ActionModel]]


class Detector(NamedTuple):
    name: str
    fn: DetectorFn


def _put_amount(text: str):
    amount = extract_number_after("put", text)
    return 1 if amount is None else amount


# --- choices -------------------------------------------------------------


def _choose_creature_type(ctx: InferenceContext) -> List[ActionModel]:
    if not P.CHOOSE_CREATURE_TYPE.search(ctx.text):
        return []
    return [ChoiceAction(label="Choose a creature type", options=[SetTypeChoiceAction(until_eot=False)])]


def _investigate(ctx: InferenceContext) -> List[ActionModel]:
    if not P.INVESTIGATE.search(ctx.text):
        return []
    amount = extract_number_after("investigate", ctx.text)
    return [CreateTokensAction(amount=1 if amount is None else amount, token="Clue")]


def _protection(ctx: InferenceContext) -> List[ActionModel]:
    colorless = bool(P.PROTECTION_COLORLESS.search(ctx.text))
    color_choice = bool(P.PROTECTION_COLOR_CHOICE.search(ctx.text))
    target, eot = ctx.scope, ctx.until_eot

    if colorless and color_choice:
        return [
            ChoiceAction(
                label="Grant protection (colorless or choose a color)",
                options=[
                    GrantKeywordAction(keyword="protection from colorless", target=target, until_eot=eot),
                    GrantKeywordChoiceAction(keyword="protection", param="color", target=target, until_eot=eot),
                ],
            )
        ]
    actions: List[ActionModel] = []
    if colorless:
        actions.append(GrantKeywordAction(keyword="protection from colorless", target=target, until_eot=eot))
    if color_choice:
        options = [
            GrantKeywordAction(keyword=f"protection from {color}", target=target, until_eot=eot)
            for color in PROTECTION_COLORS
        ]
        actions.append(ChoiceAction(label="Grant protection (choose a color)", options=options))
    return actions


def _gains_choice_of(ctx: InferenceContext) -> List[ActionModel]:
    options = extract_choice_list(ctx.text, P.GAINS_CHOICE_OF)
    if not options:
        return []
    mapped = [map_choice_option(option, TargetScope.THIS_CREATURE, ctx.until_eot) for option in options]
    return [ChoiceAction(label="Grant one (your choice)", options=mapped)]


def _any_color_mana(ctx: InferenceContext) -> List[ActionModel]:
    if not P.ANY_COLOR_MANA.search(ctx.text):
        return []
    options = [AddManaAction(symbols=[symbol]) for symbol in MANA_COLORS]
    return [ChoiceAction(label="Add one mana (choose a color)", options=options)]


def _becomes_color_choice(ctx: InferenceContext) -> List[ActionModel]:
    if not P.BECOMES_COLOR_CHOICE.search(ctx.text):
        return []
    return [ChoiceAction(label="Choose color(s)", options=[SetColorChoiceAction(until_eot=ctx.until_eot)])]


def _becomes_type_choice(ctx: InferenceContext) -> List[ActionModel]:
    if not P.BECOMES_TYPE_CHOICE.search(ctx.text):
        return []
    return [ChoiceAction(label="Choose a creature type", options=[SetTypeChoiceAction(until_eot=ctx.until_eot)])]


def _token_choice(ctx: InferenceContext) -> List[ActionModel]:
    if ctx.token_choice is None:
        return []
    first, second = ctx.token_choice.group(1), ctx.token_choice.group(2)
    return [
        ChoiceAction(
            label="Create a token (choose one)",
            options=[CreateTokensAction(amount=1, token=first), CreateTokensAction(amount=1, token=second)],
        )
    ]


# --- power / toughness ---------------------------------------------------


def _pt_buff(ctx: InferenceContext) -> List[ActionModel]:
    buff = extract_pt_buff(ctx.text, scope_or(ctx.scope, TargetScope.THIS_CREATURE))
    return [buff] if buff is not None else []


def _pt_swap(ctx: InferenceContext) -> List[ActionModel]:
    modes = extract_pt_swap_choices(ctx.text, ctx.until_eot)
    if not modes:
        return []
    return [ChoiceAction(label="Pick a P/T mode", options=modes)]


def _chosen_type_member(ctx: InferenceContext) -> List[ActionModel]:
    if not P.CHOSEN_TYPE_MEMBER.search(ctx.text):
        return []
    return [NoteAction(text=f"This creature is also the chosen type: {CHOSEN_TYPE_PLACEHOLDER}")]


def _chosen_type_lord(ctx: InferenceContext) -> List[ActionModel]:
    match = P.CHOSEN_TYPE_LORD.search(ctx.text)
    if match is None:
        return []
    return [
        PTModAction(
            power=int(match.group(1)),
            toughness=int(match.group(2)),
            target=TargetScope.YOUR_OTHER_CREATURES_OF_CHOSEN_TYPE,
            chosen_type=CHOSEN_TYPE_PLACEHOLDER,
        )
    ]


# --- life, cards, damage -------------------------------------------------


def _gain_life(ctx: InferenceContext) -> List[ActionModel]:
    amount = extract_number_after("gain", ctx.text)
    if amount is None and not P.GAIN_LIFE.search(ctx.text):
        return []
    return [
        GainLifeAction(
            amount=1 if amount is None else amount,
            target=scope_or(ctx.scope, TargetScope.YOU),
        )
    ]


def _lose_life(ctx: InferenceContext) -> List[ActionModel]:
    amount = extract_number_after("lose", ctx.text)
    if amount is None or not P.LIFE.search(ctx.text):
        return []
    return [LoseLifeAction(amount=amount, target=scope_or(ctx.scope, TargetScope.OPPONENT_OR_TARGET))]


def _draw_cards(ctx: InferenceContext) -> List[ActionModel]:
    amount = extract_number_after("draw", ctx.text)
    if amount is None and not P.DRAW_A_CARD.search(ctx.text):
        return []
    return [DrawCardsAction(amount=1 if amount is None else amount, target=scope_or(ctx.scope, TargetScope.YOU))]


def _discard_cards(ctx: InferenceContext) -> List[ActionModel]:
    amount = extract_number_after("discard", ctx.text)
    if amount is None and not P.DISCARD_A_CARD.search(ctx.text):
        return []
    return [DiscardCardsAction(amount=1 if amount is None else amount, target=scope_or(ctx.scope, TargetScope.YOU))]


def _mill_cards(ctx: InferenceContext) -> List[ActionModel]:
    amount = extract_number_after("mill", ctx.text)
    if amount is None and not P.MILL_A_CARD.search(ctx.text):
        return []
    return [MillCardsAction(amount=1 if amount is None else amount, target=ctx.scope)]


def _deal_damage(ctx: InferenceContext) -> List[ActionModel]:
    match = P.DEAL_DAMAGE.search(ctx.text)
    if match is None:
        return []
    amount = amount_from_token(match.group(1)) or 1
    target = TargetScope.ANY_TARGET if P.ANY_TARGET.search(ctx.text) else ctx.scope
    return [DealDamageAction(amount=amount, target=target)]


# --- counters ------------------------------------------------------------


def _plus_one_counters(ctx: InferenceContext) -> List[ActionModel]:
    if not P.PLUS_ONE_COUNTER.search(ctx.text):
        return []
    return [
        PutCountersAction(
            counter="+1/+1",
            amount=_put_amount(ctx.text),
            target=ctx.scope,
            until_eot=ctx.until_eot,
        )
    ]


def _loyalty_counters(ctx: InferenceContext) -> List[ActionModel]:
    if not P.LOYALTY_COUNTER.search(ctx.text):
        return []
    return [PutCountersAction(counter="loyalty", amount=_put_amount(ctx.text), target=ctx.scope)]


def _named_counter(pattern: re.Pattern) -> DetectorFn:
    def detect(ctx: InferenceContext) -> List[ActionModel]:
        match = pattern.search(ctx.text)
        if match is None or P.RESERVED_COUNTER.search(match.group(1)):
            return []
        return [PutCountersAction(counter=match.group(1).strip(), amount=_put_amount(ctx.text), target=ctx.scope)]

    return detect


def _counters_with_phrase(ctx: InferenceContext) -> List[ActionModel]:
    """``... with two stun counters on it`` (no explicit "put")."""
    match = P.COUNTERS_WITH.search(ctx.text)
    if match is None or P.RESERVED_COUNTER.search(match.group(2)):
        return []
    amount = amount_from_token(match.group(1)) if match.group(1) else None
    return [
        PutCountersAction(
            counter=match.group(2).strip(),
            amount=1 if amount is None else amount,
            target=ctx.scope,
        )
    ]


def _unnamed_counters(ctx: InferenceContext) -> List[ActionModel]:
    if not P.UNNAMED_COUNTERS.search(ctx.text) or P.RESERVED_COUNTER.search(ctx.text):
        return []
    return [PutCountersAction(counter="unspecified", amount=_put_amount(ctx.text), target=ctx.scope)]


# --- tokens, tapping, mana -----------------------------------------------


def _create_tokens(ctx: InferenceContext) -> List[ActionModel]:
    if ctx.token_choice is not None:
        return []
    if not (P.CREATE.search(ctx.text) and P.TOKEN.search(ctx.text)):
        return []
    amount = extract_number_after("create", ctx.text)
    match = P.CREATED_TOKEN_NAME.search(ctx.text)
    name = match.group(1) if match else "(see text)"
    name = P.LEADING_COUNT.sub("", name).strip()
    return [CreateTokensAction(amount=1 if amount is None else amount, token=name)]


def _untap(ctx: InferenceContext) -> List[ActionModel]:
    return [UntapAction(target=ctx.scope)] if P.UNTAP.search(ctx.text) else []


def _tap(ctx: InferenceContext) -> List[ActionModel]:
    return [TapAction(target=ctx.scope)] if P.TAP.search(ctx.text) else []


def _add_mana(ctx: InferenceContext) -> List[ActionModel]:
    if not (P.ADD.search(ctx.text) and P.MANA_SYMBOL.search(ctx.text)):
        return []
    symbols = [symbol.upper() for symbol in P.ANY_SYMBOL.findall(ctx.text)]
    return [AddManaAction(symbols=symbols)]


# --- searching -----------------------------------------------------------


def _search_library(ctx: InferenceContext) -> List[ActionModel]:
    return [SearchLibraryAction()] if P.SEARCH_LIBRARY.search(ctx.text) else []


def _search_zone(ctx: InferenceContext) -> List[ActionModel]:
    match = P.SEARCH_ZONE.search(ctx.text)
    if match is None:
        return []
    return [OpenZoneFilterAction(zone=match.group(1).lower(), query="")]


def _search_named_card(ctx: InferenceContext) -> List[ActionModel]:
    match = P.SEARCH_NAMED_CARD.search(ctx.text)
    if match is None:
        return []
    zone = (match.group(1) or match.group(2) or "").lower()
    return [OpenZoneFilterAction(zone=zone, query=(match.group(3) or "").strip())]


def _search_for_phrase(ctx: InferenceContext) -> List[ActionModel]:
    match = P.SEARCH_FOR_PHRASE.search(ctx.text)
    if match is None:
        return []
    zone = (match.group(1) or match.group(2) or "").lower()
    query = (match.group(3) or "").strip()
    if P.GENERIC_CARD_PHRASE.search(query):
        query = ""
    query = P.TRAILING_PUNCTUATION.sub("", P.TRAILING_CLAUSE.sub("", query))
    return [OpenZoneFilterAction(zone=zone, query=query)]


# --- library manipulation and removal ------------------------------------


def _scry(ctx: InferenceContext) -> List[ActionModel]:
    amount = extract_number_after("scry", ctx.text)
    return [ScryAction(amount=amount)] if amount else []


def _surveil(ctx: InferenceContext) -> List[ActionModel]:
    amount = extract_number_after("surveil", ctx.text)
    return [SurveilAction(amount=amount)] if amount else []


def _return_to_hand(ctx: InferenceContext) -> List[ActionModel]:
    return [ReturnToHandAction(target=ctx.scope)] if P.RETURN_TO_HAND.search(ctx.text) else []


def _reanimate(ctx: InferenceContext) -> List[ActionModel]:
    return [ReanimateAction(target=ctx.scope)] if P.REANIMATE.search(ctx.text) else []


def _exile(ctx: InferenceContext) -> List[ActionModel]:
    return [ExileAction(target=ctx.scope)] if P.EXILE_TARGET.search(ctx.text) else []


def _sacrifice(ctx: InferenceContext) -> List[ActionModel]:
    if not P.SACRIFICE.search(ctx.text):
        return []
    amount = extract_number_after("sacrifice", ctx.text)
    return [
        SacrificeAction(
            amount=1 if amount is None else amount,
            target=scope_or(ctx.scope, TargetScope.YOU),
        )
    ]


def _destroy(ctx: InferenceContext) -> List[ActionModel]:
    return [DestroyAction(target=ctx.scope)] if P.DESTROY_TARGET.search(ctx.text) else []


def _gain_control(ctx: InferenceContext) -> List[ActionModel]:
    return [GainControlAction(target=ctx.scope)] if P.GAIN_CONTROL.search(ctx.text) else []


def _fight(ctx: InferenceContext) -> List[ActionModel]:
    return [FightAction()] if P.FIGHT.search(ctx.text) else []


# Order is observable: actions are emitted in detector order.
DETECTORS = (
    Detector("choose_creature_type", _choose_creature_type),
    Detector("investigate", _investigate),
    Detector("protection", _protection),
    Detector("gains_choice_of", _gains_choice_of),
    Detector("any_color_mana", _any_color_mana),
    Detector("becomes_color_choice", _becomes_color_choice),
    Detector("becomes_type_choice", _becomes_type_choice),
    Detector("token_choice", _token_choice),
    Detector("pt_buff", _pt_buff),
    Detector("pt_swap", _pt_swap),
    Detector("chosen_type_member", _chosen_type_member),
    Detector("chosen_type_lord", _chosen_type_lord),
    Detector("gain_life", _gain_life),
    Detector("lose_life", _lose_life),
    Detector("draw_cards", _draw_cards),
    Detector("discard_cards", _discard_cards),
    Detector("mill_cards", _mill_cards),
    Detector("deal_damage", _deal_damage),
    Detector("plus_one_counters", _plus_one_counters),
    Detector("loyalty_counters", _loyalty_counters),
    Detector("named_counter_word", _named_counter(P.NAMED_COUNTER_WORD)),
    Detector("named_counter_phrase", _named_counter(P.NAMED_COUNTER_PHRASE)),
    Detector("counters_with_phrase", _counters_with_phrase),
    Detector("unnamed_counters", _unnamed_counters),
    Detector("create_tokens", _create_tokens),
    Detector("untap", _untap),
    Detector("tap", _tap),
    Detector("add_mana", _add_mana),
    Detector("search_library", _search_library),
    Detector("search_zone", _search_zone),
    Detector("search_named_card", _search_named_card),
    Detector("search_for_phrase", _search_for_phrase),
    Detector("scry", _scry),
    Detector("surveil", _surveil),
    Detector("return_to_hand", _return_to_hand),
    Detector("reanimate", _reanimate),
    Detector("exile", _exile),
    Detector("sacrifice", _sacrifice),
    Detector("destroy", _destroy),
    Detector("gain_control", _gain_control),
    Detector("fight", _fight),
)


def infer_actions_from_text(text: Optional[str], settings: Optional[Settings] = None) -> List[ActionModel]:
    """Infer the ordered game actions described by one effect string.

    Reminder text is ignored. Detectors are independent: a text may yield
    several actions, and overlapping detectors may describe the same phrase
    more than once.

    Args:
        text: An effect string such as ``"Draw two cards."``.
        settings: Optional settings; the process settings when omitted.

    Returns:
        At least one action. A note stands in when the text is only reminder
        text or nothing is recognised.
    """
    if not isinstance(text, str):
        if text is not None:
            logger.debug(f"[ActionInference] Ignoring non-string input of type {type(text).__name__}")
        text = ""

    stripped = strip_reminder(bound_text(text, settings).strip()).strip()
    if not stripped:
        return [NoteAction(text=REMINDER_NOTE)]

    ctx = InferenceContext.from_text(stripped)
    actions: List[ActionModel] = []
    fired: List[str] = []
    for detector in DETECTORS:
        found = detector.fn(ctx)
        if found:
            actions.extend(found)
            fired.append(detector.name)

    if not actions:
        logger.debug(f"[ActionInference] No detector matched: {stripped!r}")
        return [NoteAction(text=UNRECOGNIZED_NOTE)]

    logger.debug(f"[ActionInference] scope={ctx.scope.value} detectors={fired}")
    return actions


__all__ = [
    "ActionPatterns",
    "DETECTORS",
    "Detector",
    "InferenceContext",
    "REMINDER_NOTE",
    "UNRECOGNIZED_NOTE",
    "infer_actions_from_text",
]
