#!/usr/bin/env python3
"""Analyze oracle text from the command line and print abilities and actions."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Allow running from a checkout without installing the package
_src_root = Path(__file__).parent.parent / "src"
if str(_src_root) not in sys.path:
    sys.path.insert(0, str(_src_root))

from mtg_oracle.analyzer import CardAnalysis, analyze_card
from mtg_oracle.card_loader import load_card_definitions
from mtg_oracle.chosen_type import ChosenTypeContext
from mtg_oracle.models import CardDefinition
from mtg_oracle.renderer import action_lines
from mtg_oracle.settings import get_settings


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="oracle text of a single card")
    source.add_argument("--cards", type=Path, help="JSON file with a list of Scryfall card objects")
    parser.add_argument("--name", default="(inline)", help="card name used with --text")
    parser.add_argument("--chosen-type", help="creature type substituted for the chosen type")
    parser.add_argument("--json", action="store_true", help="print the full analysis as JSON")
    return parser


def print_analysis(analysis: CardAnalysis, context: ChosenTypeContext, as_json: bool) -> None:
    if as_json:
        print(json.dumps(analysis.to_dict(), ensure_ascii=False, indent=2))
        return

    print("=" * 80)
    print(analysis.card_name)
    print("=" * 80)
    if analysis.keywords:
        print(f"Keywords: {', '.join(analysis.keywords)}")
    for token in analysis.detection.innate_tokens:
        print(f"Token ability: {token.token} - {token.cost}: {token.effect}")
    for entry in analysis.ability_actions:
        print(f"[{entry.ability.kind.value}] {entry.ability.raw}")
        for line in action_lines(entry.actions, context):
            print(f"    {line}")
    print()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(get_settings().log_level)

    if args.text is not None:
        cards = [CardDefinition(name=args.name, oracle_text=args.text)]
    else:
        try:
            cards = load_card_definitions(args.cards)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    context = ChosenTypeContext(args.chosen_type)
    for card in cards:
        print_analysis(analyze_card(card), context, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
