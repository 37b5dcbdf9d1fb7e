from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from mtg_oracle.chosen_type import (
    CHOSEN_TYPE_PLACEHOLDER,
    ChosenTypeContext,
    get_chosen_type,
    set_chosen_type,
    with_chosen_type,
)


@pytest.fixture(autouse=True)
def clear_global_chosen_type():
    set_chosen_type(None)
    yield
    set_chosen_type(None)


def test_global_set_and_get() -> None:
    assert get_chosen_type() is None
    set_chosen_type("Elf")
    assert get_chosen_type() == "Elf"
    assert with_chosen_type(f"Elves: {CHOSEN_TYPE_PLACEHOLDER}") == "Elves: Elf"


def test_unset_type_renders_not_chosen() -> None:
    assert with_chosen_type(CHOSEN_TYPE_PLACEHOLDER) == "(not chosen)"


def test_empty_string_clears_choice() -> None:
    set_chosen_type("")
    assert get_chosen_type() is None


def test_non_string_template_passes_through() -> None:
    assert with_chosen_type(None) is None
    assert with_chosen_type(7) == 7


def test_explicit_context_ignores_global() -> None:
    set_chosen_type("Goblin")
    context = ChosenTypeContext("Merfolk")
    assert with_chosen_type(CHOSEN_TYPE_PLACEHOLDER, context) == "Merfolk"
    context.clear()
    assert with_chosen_type(CHOSEN_TYPE_PLACEHOLDER, context) == "(not chosen)"
    assert get_chosen_type() == "Goblin"


def test_shared_context_across_threads() -> None:
    context = ChosenTypeContext()

    def set_and_render(value: str) -> str:
        context.set(value)
        return context.substitute(CHOSEN_TYPE_PLACEHOLDER)

    values = ["Elf", "Goblin"] * 50
    with ThreadPoolExecutor(max_workers=8) as pool:
        rendered = list(pool.map(set_and_render, values))
    assert set(rendered) <= {"Elf", "Goblin"}
    assert context.get() in {"Elf", "Goblin"}
    assert repr(context) in {"ChosenTypeContext('Elf')", "ChosenTypeContext('Goblin')"}
