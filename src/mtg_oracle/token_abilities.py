"""Token abilities defined inside reminder text.

Reminder text such as ``(It's an artifact with "{2}, Sacrifice this artifact:
Draw a card.")`` is the only place a created token's ability is written down.
This module recovers those definitions and pairs them with the ``create …
token`` instruction they explain.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Tuple

from .lexicon import NUMBER_TOKEN, PARENTHETICAL
from .models import TokenAbilityDefinition
from .settings import Settings, bound_text

logger = logging.getLogger(__name__)

# Token names are at most five words and a creation names its token within
# MAX_PHRASE_SPAN characters of its verb.
MAX_NAME_WORDS = 5
MAX_PHRASE_SPAN = 200

TOKEN_REMINDER = re.compile(
    r"\b(?:An?\s+)?([A-Z][A-Za-z-]*(?:\s+[A-Z][A-Za-z-]*){0,%d})\s+(?:is|are)\s+(?:an?\s+)?artifacts?\s+with\s+"
    r"[“\"]([^“”\"]+)[”\"]" % (MAX_NAME_WORDS - 1),
    re.IGNORECASE,
)
QUOTED = re.compile(r"[“\"]([^“”\"]+)[”\"]")
CREATE_TOKEN = re.compile(
    r"\bcreate\b[^.]{0,%d}?\b(?:a|an|\d+|X)?\s*([A-Z][a-zA-Z-]*(?:\s+[A-Z][a-zA-Z-]*){0,%d})\s+token(s)?\b"
    % (MAX_PHRASE_SPAN, MAX_NAME_WORDS - 1),
    re.IGNORECASE,
)
TOKEN_SUFFIX = re.compile(r"\s+tokens?$", re.IGNORECASE)
LEADING_COUNT = re.compile(rf"^(?:{NUMBER_TOKEN})\s+", re.IGNORECASE)
COST_SEPARATOR = re.compile(r"\s*:\s*")


def _clean_token_name(name: str) -> str:
    return TOKEN_SUFFIX.sub("", name.strip())


def _split_quoted_ability(quoted: str) -> Optional[Tuple[str, str]]:
    """Split ``"cost: effect."`` into ``(cost, effect)`` without the final period."""
    parts = COST_SEPARATOR.split(quoted.strip(), maxsplit=1)
    if len(parts) < 2:
        return None
    cost = parts[0].strip()
    effect = parts[1].strip().rstrip(".").strip()
    return cost, effect


def _definitions_in(segment: str) -> List[TokenAbilityDefinition]:
    definitions: List[TokenAbilityDefinition] = []
    for match in TOKEN_REMINDER.finditer(segment):
        split = _split_quoted_ability(match.group(2))
        if split is None:
            continue
        cost, effect = split
        definitions.append(
            TokenAbilityDefinition(token=_clean_token_name(match.group(1)), cost=cost, effect=effect)
        )
    return definitions


def _find_by_name(
    definitions: Iterable[TokenAbilityDefinition], token: str
) -> Optional[TokenAbilityDefinition]:
    wanted = token.lower()
    return next((definition for definition in definitions if definition.key == wanted), None)


def dedupe_by_token(definitions: Iterable[TokenAbilityDefinition]) -> List[TokenAbilityDefinition]:
    """Keep the first definition for each case-insensitive token name, in order."""
    by_token = {}
    for definition in definitions:
        by_token.setdefault(definition.key, definition)
    return list(by_token.values())


def scan_reminder_token_abilities(
    full_text: Optional[str], settings: Optional[Settings] = None
) -> List[TokenAbilityDefinition]:
    """Extract token ability definitions from every parenthetical in ``full_text``.

    Example:
        ``(Clue tokens are artifacts with "{2}, Sacrifice this artifact: Draw a card.")``
        yields ``TokenAbilityDefinition("Clue", "{2}, Sacrifice this artifact", "Draw a card")``.
    """
    if not full_text or not isinstance(full_text, str):
        return []
    full_text = bound_text(full_text, settings)
    results: List[TokenAbilityDefinition] = []
    for segment in PARENTHETICAL.findall(full_text):
        results.extend(_definitions_in(segment))
    return results


def pair_inline_creation_with_reminder(
    full_text: Optional[str], settings: Optional[Settings] = None
) -> List[TokenAbilityDefinition]:
    """Resolve which reminder text belongs to each ``create … token`` instruction.

    The parenthetical that follows a creation is searched first: a definition
    with the same token name wins, otherwise a lone quoted ``cost: effect``
    in that parenthetical is adopted under the created token's name. Without
    a following parenthetical the global reminder definitions are matched by
    name.
    """
    if not full_text or not isinstance(full_text, str):
        return []

    full_text = bound_text(full_text, settings)
    global_definitions = scan_reminder_token_abilities(full_text, settings)
    pairs: List[TokenAbilityDefinition] = []

    for creation in CREATE_TOKEN.finditer(full_text):
        token = _clean_token_name(LEADING_COUNT.sub("", creation.group(1).strip()))
        following = PARENTHETICAL.search(full_text, creation.end())

        if following is None:
            match = _find_by_name(global_definitions, token)
        else:
            segment = following.group(0)
            match = _find_by_name(_definitions_in(segment), token)
            if match is None:
                quotes = QUOTED.findall(segment)
                split = _split_quoted_ability(quotes[0]) if len(quotes) == 1 else None
                if split is not None:
                    match = TokenAbilityDefinition(token=token, cost=split[0], effect=split[1])

        if match is not None:
            logger.debug(f"[TokenAbilities] paired {token!r} with {match.cost!r}: {match.effect!r}")
            pairs.append(match)

    return dedupe_by_token(pairs)


__all__ = [
    "dedupe_by_token",
    "pair_inline_creation_with_reminder",
    "scan_reminder_token_abilities",
]
