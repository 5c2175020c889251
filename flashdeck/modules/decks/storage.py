"""Deck files on disk.

Decks are stored as pretty-printed JSON, ``{name, cards: [{id, question,
answer}]}``. The default location is ``~/FlashcardDecks`` (see
``DECK_HOME``/``DECK_DIR_NAME``).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from flashdeck.core.config import settings
from flashdeck.core.errors import PersistenceError, StorageConfigError
from flashdeck.core.logging import get_logger
from flashdeck.modules.flashcards.models.flashcards import Deck

logger = get_logger(__name__)


def save_deck(path: Path | str, deck: Deck) -> None:
    data = deck.model_dump_json(indent=2)
    try:
        Path(path).write_text(data, encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"Failed to save: {e}") from e
    logger.info("Saved deck %r (%d cards) to %s", deck.name, len(deck.cards), path)


def load_deck(path: Path | str) -> Deck:
    try:
        data = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PersistenceError(f"Failed to read: {e}") from e
    try:
        return Deck.model_validate_json(data)
    except ValidationError as e:
        raise PersistenceError(f"Invalid deck file: {e}") from e


def _home_dir() -> Path:
    if settings.decks.home:
        return Path(settings.decks.home).expanduser()
    try:
        return Path.home()
    except RuntimeError as e:
        raise StorageConfigError("Cannot determine home directory") from e


def default_deck_dir() -> str:
    """Return the default deck directory, creating it if absent."""
    deck_dir = _home_dir() / settings.decks.dir_name
    if not deck_dir.exists():
        try:
            deck_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(f"Failed to create directory: {e}") from e
    return str(deck_dir)


def deck_path(deck: Deck, directory: Path | str | None = None) -> Path:
    """Suggested file path for ``deck``: ``<directory>/<sanitized name>.json``."""
    base = Path(directory) if directory is not None else Path(default_deck_dir())
    return base / f"{deck.file_stem()}.json"
