"""Render actions as numbered, human-readable lines."""
from __future__ import annotations

from typing import Iterable, List, Optional

from .actions import ActionModel
from .chosen_type import ChosenTypeContext, default_context
from .models import TargetScope

ACTORS = {
    TargetScope.YOU: "you",
    TargetScope.OPPONENT: "target opponent",
    TargetScope.EACH_OPPONENT: "each opponent",
    TargetScope.EACH_PLAYER: "each player",
    TargetScope.ANY_TARGET: "any target",
    TargetScope.TARGET_PLAYER: "target player",
    TargetScope.TARGET_CREATURE: "target creature",
    TargetScope.TARGET_CREATURE_YOU_CONTROL: "target creature you control",
    TargetScope.ANOTHER_TARGET_CREATURE_YOU_CONTROL: "another target creature you control",
    TargetScope.CREATURE_YOU_CONTROL: "a creature you control",
    TargetScope.CREATURE_OPPONENT_CONTROLS: "a creature an opponent controls",
    TargetScope.UP_TO_TARGETS: "up to N targets (choose)",
    TargetScope.ANY_TARGETS: "any number of targets (choose)",
    TargetScope.THIS_CREATURE: "this creature",
    TargetScope.OPPONENT_OR_TARGET: "target opponent/target",
    TargetScope.TWO_CREATURES_SELECTED: "two target creatures",
}
DEFAULT_ACTOR = "this creature"


def _actor(scope: TargetScope, context: ChosenTypeContext) -> str:
    if scope is TargetScope.YOUR_OTHER_CREATURES_OF_CHOSEN_TYPE:
        chosen = context.get()
        if chosen:
            return f'your other creatures of the chosen type "{chosen}"'
        return "your other creatures of the chosen type"
    return ACTORS.get(scope, DEFAULT_ACTOR)


def _plural(amount) -> str:
    return "" if amount == 1 else "s"


def _signed(value: int) -> str:
    return f"+{value}" if value >= 0 else str(value)


def _describe(action: ActionModel, context: ChosenTypeContext) -> str:
    kind = action.kind
    eot = " (until EOT)" if getattr(action, "until_eot", None) else ""
    actor = _actor(action.target, context) if hasattr(action, "target") else ""
    amount = getattr(action, "amount", 1)

    if kind == "note":
        return context.substitute(action.text)
    elif kind == "choice":
        return f"Choose one — {action.label}"
    elif kind == "set_type_choice":
        return f"Choose a creature type for {actor}{eot}."
    elif kind == "set_color_choice":
        return f"Choose color(s) for {actor}{eot}."
    elif kind == "grant_keyword":
        return f"{actor} gains {action.keyword}{eot}."
    elif kind == "grant_keyword_choice":
        return f"{actor} gains {action.keyword} (choose {action.param.replace('_', ' ')}){eot}."
    elif kind == "create_tokens":
        return f"Create {amount} {action.token} token{_plural(amount)}."
    elif kind == "add_mana":
        return f"Add mana: {' '.join(action.symbols)}."
    elif kind == "pt_mod":
        return f"{actor} gets {_signed(action.power)}/{_signed(action.toughness)}{eot}."
    elif kind == "gain_life":
        return f"{actor} gains {amount} life."
    elif kind == "lose_life":
        return f"{actor} loses {amount} life."
    elif kind == "draw_cards":
        return f"{actor} draws {amount} card{_plural(amount)}."
    elif kind == "discard_cards":
        return f"{actor} discards {amount} card{_plural(amount)}."
    elif kind == "mill_cards":
        return f"{actor} mills {amount} card{_plural(amount)}."
    elif kind == "deal_damage":
        return f"Deal {amount} damage to {actor}."
    elif kind == "put_counters":
        return f"Put {amount} {action.counter} counter{_plural(amount)} on {actor}{eot}."
    elif kind == "tap":
        return f"Tap {actor}."
    elif kind == "untap":
        return f"Untap {actor}."
    elif kind == "search_library":
        return f"{actor} searches library as specified, then shuffles."
    elif kind == "open_zone_filter":
        if action.query:
            return f"Search your {action.zone} for {action.query}."
        return f"Search your {action.zone}."
    elif kind == "scry":
        return f"{actor} scries {amount}."
    elif kind == "surveil":
        return f"{actor} surveils {amount}."
    elif kind == "return_to_hand":
        return f"Return {actor} to its owner's hand."
    elif kind == "reanimate":
        return f"Return {actor} from your graveyard to the battlefield."
    elif kind == "exile":
        return f"Exile {actor}."
    elif kind == "sacrifice":
        return f"{actor} sacrifices {amount} permanent{_plural(amount)} (choose)."
    elif kind == "destroy":
        return f"Destroy {actor}."
    elif kind == "gain_control":
        return f"Gain control of {actor}."
    elif kind == "fight":
        return "Two target creatures fight."
    return "[Unknown action]"


def action_lines(actions: Iterable[ActionModel], context: Optional[ChosenTypeContext] = None) -> List[str]:
    """Render ``actions`` as ``"1. ..."``, ``"2. ..."`` lines.

    Note text and the chosen-type scope read ``context``; the process-wide
    chosen type is used only when no context is given.
    """
    context = context or default_context()
    return [f"{index}. {_describe(action, context)}" for index, action in enumerate(actions, start=1)]


__all__ = ["ACTORS", "action_lines"]
