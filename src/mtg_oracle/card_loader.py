"""Utilities to load card definitions from Scryfall-style JSON dumps."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .models import CardDefinition

logger = logging.getLogger(__name__)


def _face_text(faces: List[Dict[str, Any]]) -> Optional[str]:
    """Join the oracle text of each face with newlines.

    Args:
        faces: ``card_faces`` entries of a double-faced or split card.

    Returns:
        The joined text or None if no face carries oracle text.
    """
    texts = [str(face["oracle_text"]) for face in faces if face.get("oracle_text")]
    return "\n".join(texts) if texts else None


def card_from_dict(card: Dict[str, Any]) -> CardDefinition:
    """Map one JSON card object to a :class:`CardDefinition`.

    Raises:
        ValueError: If the object is not a mapping or has no name.
    """
    if not isinstance(card, dict):
        raise ValueError(f"Card entry must be an object, got {type(card).__name__}")
    try:
        name = str(card["name"])
    except KeyError as exc:
        raise ValueError("Card entry is missing 'name'") from exc

    faces = [face for face in card.get("card_faces") or [] if isinstance(face, dict)]
    oracle_text = card.get("oracle_text") or _face_text(faces)
    return CardDefinition(
        name=name,
        oracle_text=oracle_text,
        type_line=card.get("type_line"),
        mana_cost=card.get("mana_cost"),
        faces=faces,
    )


def load_card_definitions(path: Union[str, Path]) -> List[CardDefinition]:
    """Load card definitions from a JSON file.

    The file holds either a list of card objects or an object with a
    ``data`` list (the shape of a Scryfall search page).

    Raises:
        ValueError: If the file cannot be read or is not card JSON.
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Cannot read card definitions from {path}: {exc}") from exc

    if isinstance(payload, dict):
        payload = payload.get("data")
    if not isinstance(payload, list):
        raise ValueError(f"{path} must contain a list of cards or an object with a 'data' list")

    definitions = [card_from_dict(card) for card in payload]
    logger.info(f"[CardLoader] Loaded {len(definitions)} cards from {path}")
    return definitions


@dataclass
class CardLibrary:
    """Collection of card definitions indexed by lowercase card name."""

    definitions: Dict[str, CardDefinition]

    @classmethod
    def from_definitions(cls, cards: Iterable[CardDefinition]) -> "CardLibrary":
        return cls({card.name.lower(): card for card in cards})

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "CardLibrary":
        return cls.from_definitions(load_card_definitions(path))

    def get(self, name: str) -> CardDefinition:
        try:
            return self.definitions[name.lower()]
        except KeyError as exc:
            raise ValueError(f"Card {name!r} not found in library") from exc

    def __len__(self) -> int:
        return len(self.definitions)


__all__ = ["CardLibrary", "card_from_dict", "load_card_definitions"]
