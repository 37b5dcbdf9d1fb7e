"""Chosen creature type shared by templated action text.

Cards such as Adaptive Automaton refer to "the chosen type". Inference emits
the ``{{CHOSEN_TYPE}}`` placeholder and rendering substitutes the value held by
a :class:`ChosenTypeContext`. Callers that render concurrently pass their own
context; the module-level functions operate on a process-wide default.
"""
from __future__ import annotations

import logging
import threading
from typing import Optional, TypeVar

logger = logging.getLogger(__name__)

CHOSEN_TYPE_PLACEHOLDER = "{{CHOSEN_TYPE}}"
NOT_CHOSEN = "(not chosen)"

T = TypeVar("T")


class ChosenTypeContext:
    """Holder for one optional chosen creature type."""

    def __init__(self, value: Optional[str] = None) -> None:
        self._value = value or None
        self._lock = threading.Lock()

    def set(self, value: Optional[str]) -> None:
        value = value or None
        with self._lock:
            self._value = value
        logger.debug(f"[ChosenType] set to {value!r}")

    def clear(self) -> None:
        self.set(None)

    def get(self) -> Optional[str]:
        with self._lock:
            return self._value

    def substitute(self, template: T) -> T:
        """Replace the placeholder in ``template``; non-strings pass through."""
        if not isinstance(template, str):
            return template
        value = self.get()
        return template.replace(CHOSEN_TYPE_PLACEHOLDER, value if value is not None else NOT_CHOSEN)

    def __repr__(self) -> str:
        return f"ChosenTypeContext({self.get()!r})"


_default_context = ChosenTypeContext()


def default_context() -> ChosenTypeContext:
    return _default_context


def set_chosen_type(value: Optional[str]) -> None:
    _default_context.set(value)


def get_chosen_type() -> Optional[str]:
    return _default_context.get()


def with_chosen_type(template: T, context: Optional[ChosenTypeContext] = None) -> T:
    """Substitute the chosen type into ``template``.

    Args:
        template: Text that may contain ``{{CHOSEN_TYPE}}``.
        context: Context to read; the process-wide default when omitted.

    Returns:
        The substituted string, or ``template`` unchanged if it is not a string.
    """
    return (context or _default_context).substitute(template)


__all__ = [
    "CHOSEN_TYPE_PLACEHOLDER",
    "NOT_CHOSEN",
    "ChosenTypeContext",
    "default_context",
    "get_chosen_type",
    "set_chosen_type",
    "with_chosen_type",
]
