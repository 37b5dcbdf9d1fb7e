"""Evergreen keyword headers such as "First strike, vigilance, lifelink"."""
from __future__ import annotations

import re
from typing import List, Optional

from .lexicon import PARENTHETICAL
from .settings import Settings, bound_text

CANONICAL_KEYWORDS = {
    "flying": "Flying",
    "first strike": "First Strike",
    "double strike": "Double Strike",
    "vigilance": "Vigilance",
    "lifelink": "Lifelink",
    "deathtouch": "Deathtouch",
    "trample": "Trample",
    "haste": "Haste",
    "defender": "Defender",
    "hexproof": "Hexproof",
    "indestructible": "Indestructible",
    "menace": "Menace",
    "ward": "Ward",
    "battle cry": "Battle Cry",
    "exalted": "Exalted",
}


def _keyword_alternation() -> str:
    alternatives = []
    for keyword in sorted(CANONICAL_KEYWORDS, key=len, reverse=True):
        alternative = re.escape(keyword)
        if keyword == "hexproof":
            # "hexproof from blue" is a conditional variant, not the keyword.
            alternative += r"(?!\s+from\b)"
        alternatives.append(alternative)
    return "|".join(alternatives)


_KEYWORD = _keyword_alternation()
KEYWORD_HEADER = re.compile(rf"^\s*(?:{_KEYWORD})(?:\s*(?:,|and)\s*(?:{_KEYWORD}))*\b", re.IGNORECASE)
PROTECTION_LINE = re.compile(r"^protection\s+from\b", re.IGNORECASE)
HEADER_SEPARATOR = re.compile(r"\s*,\s*|\s+and\s+", re.IGNORECASE)
INLINE_SPACE = re.compile(r"[ \t]+")


def extract_innate_keywords(text: Optional[str], settings: Optional[Settings] = None) -> List[str]:
    """Return the keywords a card has printed at the start of its lines.

    Reminder text is ignored and so are lines beginning "Protection from".
    ``"Flying\\nWard {2}"`` gives ``["Flying", "Ward"]``.
    """
    if not text or not isinstance(text, str):
        return []

    found: List[str] = []
    for raw_line in PARENTHETICAL.sub(" ", bound_text(text, settings)).splitlines():
        line = INLINE_SPACE.sub(" ", raw_line).strip()
        if not line or PROTECTION_LINE.match(line):
            continue
        match = KEYWORD_HEADER.match(line)
        if match is None:
            continue
        for part in HEADER_SEPARATOR.split(match.group(0)):
            label = CANONICAL_KEYWORDS.get(part.strip().lower())
            if label and label not in found:
                found.append(label)
    return found


__all__ = ["CANONICAL_KEYWORDS", "extract_innate_keywords"]
