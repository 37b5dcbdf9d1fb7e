"""Resolve the recipient scope of an effect string."""
from __future__ import annotations

import re
from typing import Optional, Pattern, Tuple

from .models import TargetScope

# Priority order: a more specific phrase must precede every phrase it contains
# ("target creature you control" before "creature you control" and
# "target creature").
SCOPE_RULES: Tuple[Tuple[Pattern[str], TargetScope], ...] = (
    (re.compile(r"\bthis creature\b"), TargetScope.THIS_CREATURE),
    (re.compile(r"\beach opponent\b"), TargetScope.EACH_OPPONENT),
    (re.compile(r"\beach player\b"), TargetScope.EACH_PLAYER),
    (re.compile(r"\bany number of target\b"), TargetScope.ANY_TARGETS),
    (re.compile(r"\bup to [\w ]+ target\b"), TargetScope.UP_TO_TARGETS),
    (re.compile(r"\banother target creature you control\b"), TargetScope.ANOTHER_TARGET_CREATURE_YOU_CONTROL),
    (re.compile(r"\btarget creature you control\b"), TargetScope.TARGET_CREATURE_YOU_CONTROL),
    (re.compile(r"\bcreature you control\b"), TargetScope.CREATURE_YOU_CONTROL),
    (re.compile(r"\bcreature an opponent controls\b"), TargetScope.CREATURE_OPPONENT_CONTROLS),
    (re.compile(r"\btarget creature\b"), TargetScope.TARGET_CREATURE),
    (re.compile(r"\btarget player\b"), TargetScope.TARGET_PLAYER),
    (re.compile(r"\byou\b"), TargetScope.YOU),
    (re.compile(r"\ban opponent\b"), TargetScope.OPPONENT),
)


def find_target(text: Optional[str]) -> TargetScope:
    """Return the single highest-priority scope mentioned in ``text``."""
    lowered = (text or "").lower()
    for pattern, scope in SCOPE_RULES:
        if pattern.search(lowered):
            return scope
    return TargetScope.UNSPECIFIED


def scope_or(scope: TargetScope, fallback: TargetScope) -> TargetScope:
    """``fallback`` when ``scope`` is unspecified, else ``scope``."""
    return fallback if scope is TargetScope.UNSPECIFIED else scope


__all__ = ["SCOPE_RULES", "find_target", "scope_or"]
