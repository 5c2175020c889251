from __future__ import annotations

from flashdeck.modules.flashcards.main import FlashcardsGenerator


def get_generator() -> FlashcardsGenerator:
    """Per-request generator; override in tests to point at a mock server."""
    return FlashcardsGenerator()
