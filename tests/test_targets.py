from __future__ import annotations

import pytest

from mtg_oracle.models import TargetScope
from mtg_oracle.targets import SCOPE_RULES, find_target, scope_or


@pytest.mark.parametrize(
    "text, scope",
    [
        ("This creature deals 2 damage to target creature.", TargetScope.THIS_CREATURE),
        ("Each opponent loses 2 life.", TargetScope.EACH_OPPONENT),
        ("Each player draws a card.", TargetScope.EACH_PLAYER),
        ("Tap any number of target creatures.", TargetScope.ANY_TARGETS),
        ("Untap up to two target lands.", TargetScope.UP_TO_TARGETS),
        ("Put a +1/+1 counter on another target creature you control.", TargetScope.ANOTHER_TARGET_CREATURE_YOU_CONTROL),
        ("Target creature you control gets +1/+1.", TargetScope.TARGET_CREATURE_YOU_CONTROL),
        ("Sacrifice a creature you control.", TargetScope.CREATURE_YOU_CONTROL),
        ("Destroy a creature an opponent controls.", TargetScope.CREATURE_OPPONENT_CONTROLS),
        ("Target creature gets +2/+2 until end of turn.", TargetScope.TARGET_CREATURE),
        ("Target player mills two cards.", TargetScope.TARGET_PLAYER),
        ("You gain 3 life.", TargetScope.YOU),
        ("An opponent discards a card.", TargetScope.OPPONENT),
        ("Draw a card.", TargetScope.UNSPECIFIED),
    ],
)
def test_find_target_priority(text: str, scope: TargetScope) -> None:
    assert find_target(text) is scope


def test_find_target_on_empty_input() -> None:
    assert find_target("") is TargetScope.UNSPECIFIED
    assert find_target(None) is TargetScope.UNSPECIFIED


def test_scope_rules_never_produce_action_only_scopes() -> None:
    produced = {scope for _pattern, scope in SCOPE_RULES}
    assert TargetScope.ANY_TARGET not in produced
    assert TargetScope.YOUR_OTHER_CREATURES_OF_CHOSEN_TYPE not in produced


def test_scope_or() -> None:
    assert scope_or(TargetScope.UNSPECIFIED, TargetScope.YOU) is TargetScope.YOU
    assert scope_or(TargetScope.TARGET_PLAYER, TargetScope.YOU) is TargetScope.TARGET_PLAYER
