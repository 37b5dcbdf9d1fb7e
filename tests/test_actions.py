from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from mtg_oracle.actions import (
    ACTION_KINDS,
    ChoiceAction,
    CreateTokensAction,
    PTModAction,
    action_from_dict,
    action_to_dict,
    actions_from_json,
)
from mtg_oracle.models import TargetScope


def test_action_kinds_are_unique() -> None:
    assert len(ACTION_KINDS) == len(set(ACTION_KINDS)) == 29


def test_dump_uses_wire_aliases_and_omits_unset_optionals() -> None:
    buff = PTModAction(power=2, toughness=2, target=TargetScope.TARGET_CREATURE, until_eot=True)
    assert action_to_dict(buff) == {
        "kind": "pt_mod",
        "power": 2,
        "toughness": 2,
        "target": "target_creature",
        "untilEOT": True,
    }


def test_validate_by_kind() -> None:
    action = action_from_dict({"kind": "pt_mod", "power": 1, "toughness": 1, "chosenType": "{{CHOSEN_TYPE}}"})
    assert isinstance(action, PTModAction)
    assert action.chosen_type == "{{CHOSEN_TYPE}}"
    assert action.target is TargetScope.THIS_CREATURE


def test_nested_choice_options_are_typed() -> None:
    data = {
        "kind": "choice",
        "label": "Create a token (choose one)",
        "options": [
            {"kind": "create_tokens", "amount": 1, "token": "Soldier"},
            {"kind": "create_tokens", "amount": "X", "token": "Spirit"},
        ],
    }
    choice = action_from_dict(data)
    assert isinstance(choice, ChoiceAction)
    assert choice.options == [
        CreateTokensAction(amount=1, token="Soldier"),
        CreateTokensAction(amount="X", token="Spirit"),
    ]
    assert action_from_dict(action_to_dict(choice)) == choice


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValidationError):
        action_from_dict({"kind": "teleport", "target": "you"})


def test_bad_amount_is_rejected() -> None:
    with pytest.raises(ValidationError):
        action_from_dict({"kind": "draw_cards", "amount": "Y"})


def test_actions_are_frozen() -> None:
    action = CreateTokensAction(amount=1, token="Clue")
    with pytest.raises(ValidationError):
        action.token = "Food"


def test_actions_from_json() -> None:
    payload = json.dumps([{"kind": "scry", "amount": 2}, {"kind": "fight"}])
    scry, fight = actions_from_json(payload)
    assert scry.amount == 2
    assert fight.target is TargetScope.TWO_CREATURES_SELECTED
