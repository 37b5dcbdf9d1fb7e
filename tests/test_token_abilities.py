from __future__ import annotations

from mtg_oracle.models import TokenAbilityDefinition
from mtg_oracle.settings import Settings
from mtg_oracle.token_abilities import (
    dedupe_by_token,
    pair_inline_creation_with_reminder,
    scan_reminder_token_abilities,
)

CLUE_REMINDER = '(Clue tokens are artifacts with "{2}, Sacrifice this artifact: Draw a card.")'


def test_scan_plural_reminder() -> None:
    assert scan_reminder_token_abilities(CLUE_REMINDER) == [
        TokenAbilityDefinition(token="Clue", cost="{2}, Sacrifice this artifact", effect="Draw a card")
    ]


def test_scan_accepts_curly_quotes_and_singular_article() -> None:
    text = "(A Food token is an artifact with “{2}, {T}, Sacrifice this artifact: You gain 3 life.”)"
    (definition,) = scan_reminder_token_abilities(text)
    assert definition.token == "Food"
    assert definition.cost == "{2}, {T}, Sacrifice this artifact"
    assert definition.effect == "You gain 3 life"


def test_scan_ignores_text_outside_parentheses() -> None:
    assert scan_reminder_token_abilities('Clue tokens are artifacts with "{2}: Draw a card."') == []
    assert scan_reminder_token_abilities("") == []
    assert scan_reminder_token_abilities(None) == []


def test_pair_adopts_single_quoted_ability_in_following_reminder() -> None:
    text = 'Create a Food token. (It\'s an artifact with "{2}, {T}, Sacrifice this artifact: You gain 3 life.")'
    assert pair_inline_creation_with_reminder(text) == [
        TokenAbilityDefinition(token="Food", cost="{2}, {T}, Sacrifice this artifact", effect="You gain 3 life")
    ]


def test_pair_matches_named_definition_in_following_reminder() -> None:
    text = f"When this creature enters, create a Clue token. {CLUE_REMINDER}"
    (definition,) = pair_inline_creation_with_reminder(text)
    assert definition.token == "Clue"
    assert definition.effect == "Draw a card"


def test_pair_without_reminder_finds_nothing() -> None:
    assert pair_inline_creation_with_reminder("Create two Treasure tokens.") == []
    assert pair_inline_creation_with_reminder(None) == []


def test_dedupe_keeps_first_definition_per_name() -> None:
    first = TokenAbilityDefinition(token="Clue", cost="{2}", effect="Draw a card")
    second = TokenAbilityDefinition(token="clue", cost="{3}", effect="Draw two cards")
    other = TokenAbilityDefinition(token="Food", cost="{2}", effect="You gain 3 life")
    assert dedupe_by_token([first, other, second]) == [first, other]


def test_settings_bound_applies_to_scan_and_pair() -> None:
    text = "x" * 30 + " Create a Clue token. " + CLUE_REMINDER
    settings = Settings(max_text_length=20)
    assert scan_reminder_token_abilities(text, settings) == []
    assert pair_inline_creation_with_reminder(text, settings) == []


def test_pair_handles_repeated_create_without_tokens() -> None:
    assert pair_inline_creation_with_reminder("create " * 1000) == []


def test_pair_reads_symbolic_count_before_name() -> None:
    text = 'Create X Food tokens. (They\'re artifacts with "{2}, {T}, Sacrifice this artifact: You gain 3 life.")'
    assert pair_inline_creation_with_reminder(text) == [
        TokenAbilityDefinition(token="Food", cost="{2}, {T}, Sacrifice this artifact", effect="You gain 3 life")
    ]
