from __future__ import annotations

import logging

import pytest

from mtg_oracle.actions import AddManaAction, GainLifeAction
from mtg_oracle.analyzer import analyze_card, detect_all
from mtg_oracle.models import AbilityKind, CardDefinition, DetectAllResult, TargetScope

CLUE_CARD = (
    "When this creature enters, create a Clue token. "
    '(Clue tokens are artifacts with "{2}, Sacrifice this artifact: Draw a card.")'
)


@pytest.mark.parametrize("text", ["", None])
def test_detect_all_on_empty_input(text) -> None:
    result = detect_all(text)
    assert result == DetectAllResult()
    assert result.to_dict() == {"abilities": [], "expandedAbilities": [], "abilitiesOnly": [], "innateTokens": []}


def test_chain_steps_become_siblings() -> None:
    result = detect_all("{2}, {T}: Draw a card. Then discard a card.")
    assert len(result.abilities) == 1
    head, step = result.expanded_abilities
    assert head.chain == ()
    assert head.cost == "{2}, {T}"
    assert step.kind is AbilityKind.ACTIVATED
    assert step.raw == step.effect == "Then discard a card."
    assert step.cost is None
    assert result.abilities_only == result.expanded_abilities


def test_static_abilities_pass_through() -> None:
    result = detect_all("Flying\n{T}: Add {G}.")
    assert [ability.kind for ability in result.expanded_abilities] == [AbilityKind.STATIC, AbilityKind.ACTIVATED]
    assert [ability.raw for ability in result.abilities_only] == ["{T}: Add {G}."]


def test_innate_tokens_are_deduplicated() -> None:
    result = detect_all(CLUE_CARD)
    assert [token.token for token in result.innate_tokens] == ["Clue"]
    assert result.innate_tokens[0].cost == "{2}, Sacrifice this artifact"


def test_detect_all_is_not_cached() -> None:
    first = detect_all("Flying")
    second = detect_all("Flying")
    assert first == second
    assert first is not second


def test_analyze_card_infers_actions_per_ability(caplog: pytest.LogCaptureFixture) -> None:
    card = CardDefinition(name="Llanowar Elves", oracle_text="{T}: Add {G}.")
    with caplog.at_level(logging.INFO, logger="mtg_oracle.analyzer"):
        analysis = analyze_card(card)
    assert analysis.card_name == "Llanowar Elves"
    assert analysis.ability_actions[0].actions == [AddManaAction(symbols=["G"])]
    assert "[CardAnalysis]" in caplog.text


def test_analyze_card_collects_keywords_and_triggers() -> None:
    card = CardDefinition(
        name="Lifelink Angel",
        oracle_text="Flying, vigilance\nWhen this creature enters, you gain 3 life.",
    )
    analysis = analyze_card(card)
    assert analysis.keywords == ["Flying", "Vigilance"]
    (entry,) = analysis.ability_actions
    assert entry.ability.trigger == "When this creature enters"
    assert entry.actions == [GainLifeAction(amount=3, target=TargetScope.YOU)]


def test_analyze_card_without_text() -> None:
    analysis = analyze_card(CardDefinition(name="Vanilla"))
    assert analysis.ability_actions == []
    assert analysis.keywords == []
    assert analysis.to_dict()["detection"]["abilities"] == []
