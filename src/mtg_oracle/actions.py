"""Typed game actions inferred from effect text.

Every action is a frozen pydantic model tagged by ``kind``; :data:`Action` is
the discriminated union over all of them. Field names are snake_case in Python
and keep the camelCase wire names (``untilEOT``, ``chosenType``) when dumped.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .models import TargetScope

Amount = Union[int, Literal["X"]]


class ActionModel(BaseModel):
    """Base for every action variant."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class NoteAction(ActionModel):
    kind: Literal["note"] = "note"
    text: str


class ChoiceAction(ActionModel):
    """A player picks exactly one of ``options``."""

    kind: Literal["choice"] = "choice"
    label: str
    options: List["Action"]


class SetTypeChoiceAction(ActionModel):
    kind: Literal["set_type_choice"] = "set_type_choice"
    target: TargetScope = TargetScope.THIS_CREATURE
    until_eot: bool = Field(False, alias="untilEOT")


class SetColorChoiceAction(ActionModel):
    kind: Literal["set_color_choice"] = "set_color_choice"
    target: TargetScope = TargetScope.THIS_CREATURE
    until_eot: bool = Field(False, alias="untilEOT")


class GrantKeywordAction(ActionModel):
    kind: Literal["grant_keyword"] = "grant_keyword"
    keyword: str
    target: TargetScope = TargetScope.THIS_CREATURE
    until_eot: bool = Field(False, alias="untilEOT")


class GrantKeywordChoiceAction(ActionModel):
    """Grant a keyword whose parameter (a color, a land type) is chosen later."""

    kind: Literal["grant_keyword_choice"] = "grant_keyword_choice"
    keyword: str
    param: str
    target: TargetScope = TargetScope.THIS_CREATURE
    until_eot: bool = Field(False, alias="untilEOT")


class CreateTokensAction(ActionModel):
    kind: Literal["create_tokens"] = "create_tokens"
    amount: Amount = 1
    token: str
    controller: str = "you"


class AddManaAction(ActionModel):
    kind: Literal["add_mana"] = "add_mana"
    symbols: List[str]


class PTModAction(ActionModel):
    kind: Literal["pt_mod"] = "pt_mod"
    power: int
    toughness: int
    target: TargetScope = TargetScope.THIS_CREATURE
    until_eot: Optional[bool] = Field(None, alias="untilEOT")
    chosen_type: Optional[str] = Field(None, alias="chosenType")


class GainLifeAction(ActionModel):
    kind: Literal["gain_life"] = "gain_life"
    amount: Amount = 1
    target: TargetScope = TargetScope.YOU


class LoseLifeAction(ActionModel):
    kind: Literal["lose_life"] = "lose_life"
    amount: Amount = 1
    target: TargetScope = TargetScope.OPPONENT_OR_TARGET


class DrawCardsAction(ActionModel):
    kind: Literal["draw_cards"] = "draw_cards"
    amount: Amount = 1
    target: TargetScope = TargetScope.YOU


class DiscardCardsAction(ActionModel):
    kind: Literal["discard_cards"] = "discard_cards"
    amount: Amount = 1
    target: TargetScope = TargetScope.YOU


class MillCardsAction(ActionModel):
    kind: Literal["mill_cards"] = "mill_cards"
    amount: Amount = 1
    target: TargetScope = TargetScope.UNSPECIFIED


class DealDamageAction(ActionModel):
    kind: Literal["deal_damage"] = "deal_damage"
    amount: Amount = 1
    target: TargetScope = TargetScope.UNSPECIFIED


class PutCountersAction(ActionModel):
    kind: Literal["put_counters"] = "put_counters"
    counter: str
    amount: Amount = 1
    target: TargetScope = TargetScope.UNSPECIFIED
    until_eot: Optional[bool] = Field(None, alias="untilEOT")


class TapAction(ActionModel):
    kind: Literal["tap"] = "tap"
    target: TargetScope = TargetScope.UNSPECIFIED


class UntapAction(ActionModel):
    kind: Literal["untap"] = "untap"
    target: TargetScope = TargetScope.THIS_CREATURE


class SearchLibraryAction(ActionModel):
    kind: Literal["search_library"] = "search_library"
    target: TargetScope = TargetScope.YOU
    note: str = "perform search + shuffle as specified"


class OpenZoneFilterAction(ActionModel):
    """Open a zone browser, optionally pre-filtered by ``query``."""

    kind: Literal["open_zone_filter"] = "open_zone_filter"
    zone: str
    query: str = ""


class ScryAction(ActionModel):
    kind: Literal["scry"] = "scry"
    amount: Amount = 1
    target: TargetScope = TargetScope.YOU


class SurveilAction(ActionModel):
    kind: Literal["surveil"] = "surveil"
    amount: Amount = 1
    target: TargetScope = TargetScope.YOU


class ReturnToHandAction(ActionModel):
    kind: Literal["return_to_hand"] = "return_to_hand"
    target: TargetScope = TargetScope.UNSPECIFIED


class ReanimateAction(ActionModel):
    kind: Literal["reanimate"] = "reanimate"
    target: TargetScope = TargetScope.UNSPECIFIED


class ExileAction(ActionModel):
    kind: Literal["exile"] = "exile"
    target: TargetScope = TargetScope.UNSPECIFIED


class SacrificeAction(ActionModel):
    kind: Literal["sacrifice"] = "sacrifice"
    amount: Amount = 1
    target: TargetScope = TargetScope.YOU


class DestroyAction(ActionModel):
    kind: Literal["destroy"] = "destroy"
    target: TargetScope = TargetScope.UNSPECIFIED


class GainControlAction(ActionModel):
    kind: Literal["gain_control"] = "gain_control"
    target: TargetScope = TargetScope.UNSPECIFIED


class FightAction(ActionModel):
    kind: Literal["fight"] = "fight"
    target: TargetScope = TargetScope.TWO_CREATURES_SELECTED


ACTION_MODELS = (
    NoteAction,
    ChoiceAction,
    SetTypeChoiceAction,
    SetColorChoiceAction,
    GrantKeywordAction,
    GrantKeywordChoiceAction,
    CreateTokensAction,
    AddManaAction,
    PTModAction,
    GainLifeAction,
    LoseLifeAction,
    DrawCardsAction,
    DiscardCardsAction,
    MillCardsAction,
    DealDamageAction,
    PutCountersAction,
    TapAction,
    UntapAction,
    SearchLibraryAction,
    OpenZoneFilterAction,
    ScryAction,
    SurveilAction,
    ReturnToHandAction,
    ReanimateAction,
    ExileAction,
    SacrificeAction,
    DestroyAction,
    GainControlAction,
    FightAction,
)

Action = Annotated[
    Union[
        NoteAction,
        ChoiceAction,
        SetTypeChoiceAction,
        SetColorChoiceAction,
        GrantKeywordAction,
        GrantKeywordChoiceAction,
        CreateTokensAction,
        AddManaAction,
        PTModAction,
        GainLifeAction,
        LoseLifeAction,
        DrawCardsAction,
        DiscardCardsAction,
        MillCardsAction,
        DealDamageAction,
        PutCountersAction,
        TapAction,
        UntapAction,
        SearchLibraryAction,
        OpenZoneFilterAction,
        ScryAction,
        SurveilAction,
        ReturnToHandAction,
        ReanimateAction,
        ExileAction,
        SacrificeAction,
        DestroyAction,
        GainControlAction,
        FightAction,
    ],
    Field(discriminator="kind"),
]

ChoiceAction.model_rebuild()

ACTION_KINDS = tuple(model.model_fields["kind"].default for model in ACTION_MODELS)

_ACTION_ADAPTER: TypeAdapter = TypeAdapter(Action)
_ACTION_LIST_ADAPTER: TypeAdapter = TypeAdapter(List[Action])


def action_to_dict(action: ActionModel) -> Dict[str, Any]:
    """Dump an action to a JSON-ready dict using wire field names."""
    return action.model_dump(mode="json", by_alias=True, exclude_none=True)


def actions_to_dicts(actions: List[ActionModel]) -> List[Dict[str, Any]]:
    return [action_to_dict(action) for action in actions]


def action_from_dict(data: Dict[str, Any]) -> ActionModel:
    """Validate ``data`` into the matching action variant.

    Raises:
        pydantic.ValidationError: unknown ``kind`` or malformed fields.
    """
    return _ACTION_ADAPTER.validate_python(data)


def actions_from_json(payload: str) -> List[ActionModel]:
    return _ACTION_LIST_ADAPTER.validate_json(payload)


__all__ = [
    "ACTION_KINDS",
    "ACTION_MODELS",
    "Action",
    "ActionModel",
    "AddManaAction",
    "Amount",
    "ChoiceAction",
    "CreateTokensAction",
    "DealDamageAction",
    "DestroyAction",
    "DiscardCardsAction",
    "DrawCardsAction",
    "ExileAction",
    "FightAction",
    "GainControlAction",
    "GainLifeAction",
    "GrantKeywordAction",
    "GrantKeywordChoiceAction",
    "LoseLifeAction",
    "MillCardsAction",
    "NoteAction",
    "OpenZoneFilterAction",
    "PTModAction",
    "PutCountersAction",
    "ReanimateAction",
    "ReturnToHandAction",
    "SacrificeAction",
    "ScryAction",
    "SearchLibraryAction",
    "SetColorChoiceAction",
    "SetTypeChoiceAction",
    "SurveilAction",
    "TapAction",
    "UntapAction",
    "action_from_dict",
    "action_to_dict",
    "actions_from_json",
    "actions_to_dicts",
]
