"""Split oracle text into ability clauses and classify them."""
from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import List, Optional, Pattern, Tuple

from .lexicon import PARENTHETICAL
from .models import AbilityClause, AbilityKind
from .settings import Settings, bound_text

logger = logging.getLogger(__name__)

# Sentence boundary: terminal punctuation, whitespace, then a clause opener.
CLAUSE_BOUNDARY = re.compile(
    r"(?<=[.!?;—])\s+(?=(?:[A-Z(“\"']|Then\b|If you do\b|You may\b|Among\b|From among\b|Of those\b"
    r"|Put\b|Return\b|Reveal\b|Otherwise\b|This way\b|Create\b|Draw\b))",
    re.IGNORECASE,
)
LINE_BREAK = re.compile(r"\n+")

# Ordered, first match wins.
CLASSIFIER_RULES: Tuple[Tuple[str, Pattern[str], AbilityKind], ...] = (
    ("as_enters", re.compile(r"^as(?!\s+long\b)(?=.*\benters\b)", re.IGNORECASE), AbilityKind.TRIGGERED),
    ("parenthetical", re.compile(r"^\(.*\)$"), AbilityKind.STATIC),
    ("token_reminder", re.compile(r"^it[’']s an artifact with\b", re.IGNORECASE), AbilityKind.STATIC),
    ("when", re.compile(r"^(?:when|whenever)\b", re.IGNORECASE), AbilityKind.TRIGGERED),
    ("at", re.compile(r"^at\b", re.IGNORECASE), AbilityKind.TRIGGERED),
    ("loyalty_cost", re.compile(r"^\([+−-]?\d+\)\s*:"), AbilityKind.ACTIVATED),
    (
        "cost_before_colon",
        re.compile(r"(?:\{[^}]+\}|tap|untap|discard|sacrifice|pay|exile)[^:]*:\s*", re.IGNORECASE),
        AbilityKind.ACTIVATED,
    ),
)

CHAIN_CONTINUATION = re.compile(
    r"^(?:Then\b|If you do\b|You may\b|For each\b|Among (?:them|those)\b|From among\b|Of those\b|Put\b"
    r"|Return\b|Reveal\b|Otherwise\b|This way\b|Create\b|Draw\b|It\b|They\b|Those\b|This creature\b"
    r"|Other creatures\b|That (?:card|creature|player|permanent|spell)\b)",
    re.IGNORECASE,
)


def split_clauses(text: Optional[str]) -> List[str]:
    """Split text into lines, then lines into sentence-like clauses."""
    if not text:
        return []
    clauses: List[str] = []
    for line in LINE_BREAK.split(text):
        line = line.strip()
        if not line:
            continue
        for part in CLAUSE_BOUNDARY.split(line):
            if part and part.strip():
                clauses.append(part.strip())
    return clauses


def classify_clause(clause: str) -> AbilityKind:
    c = clause.strip()
    for _name, pattern, kind in CLASSIFIER_RULES:
        if pattern.search(c):
            return kind
    return AbilityKind.STATIC


def split_cost_and_effect(clause: str) -> Tuple[Optional[str], str]:
    """Split at the first colon; no colon means no cost."""
    index = clause.find(":")
    if index > -1:
        return clause[:index].strip(), clause[index + 1:].strip()
    return None, clause.strip()


def parse_clause(clause: str) -> AbilityClause:
    kind = classify_clause(clause)
    cost, effect = split_cost_and_effect(clause)
    trigger = None
    if kind is AbilityKind.TRIGGERED and cost is None:
        # "When this creature enters, draw a card." -> trigger / effect
        comma = effect.find(",")
        if comma > -1:
            trigger = effect[:comma].strip()
            effect = effect[comma + 1:].strip()
    return AbilityClause(kind=kind, raw=clause, cost=cost, effect=effect, trigger=trigger)


def _is_chain_step(clause: str) -> bool:
    return bool(CHAIN_CONTINUATION.match(clause.strip())) and classify_clause(clause) is AbilityKind.STATIC


def group_into_effect_chains(clauses: List[str]) -> List[AbilityClause]:
    """Attach continuation clauses to the activated/triggered head before them.

    A head absorbs the clauses that immediately follow it for as long as each
    one opens with a continuation phrase ("Then", "If you do", "It", ...) and
    is itself static. Absorbed clauses do not appear as abilities of their own.
    """
    abilities: List[AbilityClause] = []
    i = 0
    while i < len(clauses):
        head = parse_clause(clauses[i])
        j = i + 1
        if head.is_ability:
            steps: List[str] = []
            while j < len(clauses) and _is_chain_step(clauses[j]):
                steps.append(clauses[j])
                j += 1
            if steps:
                head = replace(head, chain=tuple(steps))
        abilities.append(head)
        i = j
    return abilities


def parse_oracle(text: Optional[str], settings: Optional[Settings] = None) -> List[AbilityClause]:
    """Classify oracle text into ability clauses.

    Reminder text is blanked out first so it is never treated as a gameplay
    clause.

    Args:
        text: Rules text without the card name or mana cost header.
        settings: Optional settings; the process settings when omitted.

    Returns:
        Ordered ability clauses, empty for empty input.
    """
    if not text or not isinstance(text, str):
        return []
    text = bound_text(text, settings)
    without_reminders = PARENTHETICAL.sub(" ", text)
    clauses = split_clauses(without_reminders)
    abilities = group_into_effect_chains(clauses)
    logger.debug(f"[AbilityDetect] {len(clauses)} clauses -> {len(abilities)} abilities")
    return abilities


__all__ = [
    "CLASSIFIER_RULES",
    "classify_clause",
    "group_into_effect_chains",
    "parse_clause",
    "parse_oracle",
    "split_clauses",
    "split_cost_and_effect",
]
