from __future__ import annotations

import logging

import pytest

from mtg_oracle.analyzer import analyze_card, detect_all
from mtg_oracle.clauses import parse_oracle
from mtg_oracle.models import CardDefinition
from mtg_oracle.settings import DEFAULT_MAX_TEXT_LENGTH, Settings, bound_text, get_settings, reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MTG_ORACLE_MAX_TEXT_LENGTH", raising=False)
    monkeypatch.delenv("MTG_ORACLE_LOG_LEVEL", raising=False)
    settings = get_settings()
    assert settings.max_text_length == DEFAULT_MAX_TEXT_LENGTH
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MTG_ORACLE_MAX_TEXT_LENGTH", "50")
    monkeypatch.setenv("MTG_ORACLE_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.max_text_length == 50
    assert settings.log_level == "DEBUG"


def test_invalid_length_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MTG_ORACLE_MAX_TEXT_LENGTH", "lots")
    assert get_settings().max_text_length == DEFAULT_MAX_TEXT_LENGTH


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("MTG_ORACLE_MAX_TEXT_LENGTH", "10")
    assert get_settings() is first


def test_bound_text_truncates_and_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="mtg_oracle.settings"):
        assert bound_text("abcdefgh", Settings(max_text_length=5)) == "abcde"
    assert "truncated" in caplog.text


def test_bound_text_keeps_short_text() -> None:
    assert bound_text("Flying", Settings(max_text_length=5000)) == "Flying"


def test_parse_oracle_respects_max_length() -> None:
    text = "Flying\n" + "Draw a card. " * 10
    abilities = parse_oracle(text, Settings(max_text_length=6))
    assert [ability.raw for ability in abilities] == ["Flying"]


def test_detect_all_scans_only_bounded_text() -> None:
    text = (
        "Flying\n" + "x" * 60
        + ' Create a Clue token. (Clue tokens are artifacts with "{2}: Draw a card.")'
    )
    result = detect_all(text, Settings(max_text_length=6))
    assert [ability.raw for ability in result.abilities] == ["Flying"]
    assert result.innate_tokens == []


def test_analyze_card_bounds_keywords() -> None:
    card = CardDefinition(name="Long Card", oracle_text="x" * 40 + "\nFlying")
    analysis = analyze_card(card, Settings(max_text_length=20))
    assert analysis.keywords == []
    assert analysis.detection.innate_tokens == []
