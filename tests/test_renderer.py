from __future__ import annotations

import pytest

from mtg_oracle.actions import (
    ACTION_KINDS,
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
from mtg_oracle.chosen_type import ChosenTypeContext, set_chosen_type
from mtg_oracle.models import TargetScope
from mtg_oracle.renderer import action_lines

ONE_OF_EACH = [
    NoteAction(text="Review manually."),
    ChoiceAction(label="Choose a creature type", options=[SetTypeChoiceAction()]),
    SetTypeChoiceAction(),
    SetColorChoiceAction(),
    GrantKeywordAction(keyword="flying"),
    GrantKeywordChoiceAction(keyword="landwalk", param="land_type"),
    CreateTokensAction(amount=2, token="Treasure"),
    AddManaAction(symbols=["G", "G"]),
    PTModAction(power=2, toughness=-1),
    GainLifeAction(amount=3),
    LoseLifeAction(amount=2),
    DrawCardsAction(amount=1),
    DiscardCardsAction(amount=2),
    MillCardsAction(amount=3),
    DealDamageAction(amount="X", target=TargetScope.ANY_TARGET),
    PutCountersAction(counter="+1/+1", amount=1),
    TapAction(target=TargetScope.TARGET_CREATURE),
    UntapAction(),
    SearchLibraryAction(),
    OpenZoneFilterAction(zone="library", query="Forest"),
    ScryAction(amount=2),
    SurveilAction(amount=1),
    ReturnToHandAction(target=TargetScope.TARGET_CREATURE),
    ReanimateAction(target=TargetScope.TARGET_CREATURE),
    ExileAction(target=TargetScope.TARGET_CREATURE),
    SacrificeAction(amount=1),
    DestroyAction(target=TargetScope.TARGET_CREATURE),
    GainControlAction(target=TargetScope.TARGET_CREATURE),
    FightAction(),
]


@pytest.fixture(autouse=True)
def clear_global_chosen_type():
    set_chosen_type(None)
    yield
    set_chosen_type(None)


def test_every_kind_has_a_line() -> None:
    assert {action.kind for action in ONE_OF_EACH} == set(ACTION_KINDS)
    lines = action_lines(ONE_OF_EACH)
    assert len(lines) == len(ONE_OF_EACH)
    assert not any("[Unknown action]" in line for line in lines)


def test_lines_are_numbered_from_one() -> None:
    lines = action_lines([DrawCardsAction(amount=1), DrawCardsAction(amount=2)])
    assert lines == ["1. you draws 1 card.", "2. you draws 2 cards."]


def test_line_formats() -> None:
    lines = action_lines(
        [
            DealDamageAction(amount=3, target=TargetScope.ANY_TARGET),
            PTModAction(power=2, toughness=-1, target=TargetScope.TARGET_CREATURE, until_eot=True),
            PutCountersAction(counter="+1/+1", amount=2, target=TargetScope.THIS_CREATURE),
            CreateTokensAction(amount=1, token="Clue"),
            AddManaAction(symbols=["W", "U"]),
            ChoiceAction(label="Pick a P/T mode", options=[]),
        ]
    )
    assert lines == [
        "1. Deal 3 damage to any target.",
        "2. target creature gets +2/-1 (until EOT).",
        "3. Put 2 +1/+1 counters on this creature.",
        "4. Create 1 Clue token.",
        "5. Add mana: W U.",
        "6. Choose one — Pick a P/T mode",
    ]


def test_unspecified_scope_reads_as_this_creature() -> None:
    assert action_lines([DestroyAction()]) == ["1. Destroy this creature."]


def test_chosen_type_scope_uses_explicit_context() -> None:
    lord = PTModAction(power=1, toughness=1, target=TargetScope.YOUR_OTHER_CREATURES_OF_CHOSEN_TYPE)
    set_chosen_type("Goblin")
    assert action_lines([lord], ChosenTypeContext("Elf")) == [
        '1. your other creatures of the chosen type "Elf" gets +1/+1.'
    ]
    assert action_lines([lord]) == ['1. your other creatures of the chosen type "Goblin" gets +1/+1.']


def test_chosen_type_scope_without_choice() -> None:
    lord = PTModAction(power=1, toughness=1, target=TargetScope.YOUR_OTHER_CREATURES_OF_CHOSEN_TYPE)
    assert action_lines([lord]) == ["1. your other creatures of the chosen type gets +1/+1."]


def test_note_substitutes_chosen_type() -> None:
    note = NoteAction(text="This creature is also the chosen type: {{CHOSEN_TYPE}}")
    assert action_lines([note]) == ["1. This creature is also the chosen type: (not chosen)"]
    assert action_lines([note], ChosenTypeContext("Sliver")) == ["1. This creature is also the chosen type: Sliver"]
