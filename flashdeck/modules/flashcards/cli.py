from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from flashdeck.core.errors import FlashdeckError
from flashdeck.modules.decks.storage import default_deck_dir, load_deck, save_deck
from flashdeck.modules.flashcards.main import FlashcardsGenerator
from flashdeck.modules.flashcards.models.flashcards import DEFAULT_DECK_NAME, Deck


def _load_text(args: argparse.Namespace) -> str:
    if args.text is not None and args.text_file:
        raise SystemExit("Provide either --text or --text-file, not both")
    if args.text_file:
        try:
            return Path(args.text_file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SystemExit(f"Cannot read --text-file: {e}") from e
    if args.text is not None:
        return args.text
    raise SystemExit("--text or --text-file is required")


def _generate(args: argparse.Namespace, svc: FlashcardsGenerator) -> int:
    text = _load_text(args)
    if not args.deck:
        cards = svc.generate_sync(text, args.model)
        print(json.dumps(FlashcardsGenerator.to_jsonable(cards), indent=2))
        return 0

    deck_file = Path(args.deck)
    if deck_file.exists():
        deck = load_deck(deck_file)
    else:
        deck = Deck.empty(args.name or DEFAULT_DECK_NAME)
    if args.name:
        deck = deck.model_copy(update={"name": args.name})

    before = len(deck.cards)
    deck = svc.generate_into_sync(deck, text, args.model, replace=args.replace)
    save_deck(deck_file, deck)
    added = len(deck.cards) if args.replace else len(deck.cards) - before
    print(f"Generated {added} flashcards; {deck_file} now holds {len(deck.cards)}.")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="flashdeck", description="Generate study flashcards with a local Ollama model"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate flashcards from text")
    g.add_argument("--text", "-t", help="Source text")
    g.add_argument("--text-file", help="Path to a file containing the source text")
    g.add_argument("--model", "-m", default="", help="Ollama model (default: mistral)")
    g.add_argument("--deck", help="Deck file to add the cards to (created if missing)")
    g.add_argument(
        "--replace",
        action="store_true",
        help="Replace the deck's existing cards instead of appending",
    )
    g.add_argument("--name", help="Deck name to set when writing --deck")

    sub.add_parser("models", help="List models available on the Ollama server")
    sub.add_parser("default-dir", help="Print (and create) the default deck directory")

    args = parser.parse_args(argv)
    svc = FlashcardsGenerator()
    try:
        if args.cmd == "generate":
            return _generate(args, svc)
        if args.cmd == "models":
            for name in svc.list_models_sync():
                print(name)
            return 0
        if args.cmd == "default-dir":
            print(default_deck_dir())
            return 0
    except FlashdeckError as e:
        print(str(e), file=sys.stderr)
        return 1

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
