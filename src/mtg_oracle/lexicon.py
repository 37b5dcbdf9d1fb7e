"""Shared lexical helpers for oracle text: number words, counts, reminder text."""
from __future__ import annotations

import re
from typing import Optional, Union

Amount = Union[int, str]

NUMBER_WORDS = {
    "a": 1,
    "an": 1,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
    "twenty": 20,
}

# Longest words first so "sixteen" is never read as "six".
NUMBER_TOKEN = r"X|\d+|" + "|".join(sorted(NUMBER_WORDS, key=len, reverse=True))

UNTIL_END_OF_TURN = re.compile(r"\buntil end of turn\b", re.IGNORECASE)
PARENTHETICAL = re.compile(r"\([^)]*\)")
WHOLLY_PARENTHETICAL = re.compile(r"^\(.*\)$")


def number_from_token(token: Optional[str]) -> Optional[int]:
    """Convert ``"3"`` or ``"three"`` to an int, ``None`` when unknown."""
    if not token:
        return None
    if token.isdigit():
        return int(token)
    return NUMBER_WORDS.get(token.lower())


def amount_from_token(token: Optional[str]) -> Optional[Amount]:
    """Like :func:`number_from_token` but keeps a literal ``X`` symbolic."""
    if token and token.lower() == "x":
        return "X"
    return number_from_token(token)


def extract_number_after(word: str, text: str) -> Optional[Amount]:
    """Return the count that follows ``word`` (or its plural) in ``text``.

    Examples:
        ``extract_number_after("draw", "Draw two cards.")`` -> ``2``
        ``extract_number_after("create", "create X Food tokens")`` -> ``"X"``

    Returns:
        An int, the string ``"X"``, or ``None`` when no count follows the word.
    """
    if not text:
        return None
    pattern = re.compile(
        rf"\b{re.escape(word)}s?\s+({NUMBER_TOKEN})\b",
        re.IGNORECASE,
    )
    match = pattern.search(text)
    if not match:
        return None
    return amount_from_token(match.group(1))


def has_until_end_of_turn(text: Optional[str]) -> bool:
    return bool(UNTIL_END_OF_TURN.search(text or ""))


def strip_reminder(text: str) -> str:
    """Drop parenthetical reminder text.

    A text that is nothing but one parenthetical collapses to ``""``.
    """
    if WHOLLY_PARENTHETICAL.match(text.strip()):
        return ""
    return PARENTHETICAL.sub("", text)


def normalize_minus(text: str) -> str:
    """Replace the typographic minus used on cards with an ASCII hyphen."""
    return text.replace("−", "-")


__all__ = [
    "Amount",
    "NUMBER_WORDS",
    "NUMBER_TOKEN",
    "amount_from_token",
    "extract_number_after",
    "has_until_end_of_turn",
    "normalize_minus",
    "number_from_token",
    "strip_reminder",
]
