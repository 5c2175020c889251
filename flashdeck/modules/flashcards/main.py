"""Flashcards service class.

Provides a high-level class that bundles generation, model discovery and deck
merging so the API handlers and the CLI share one entry point.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from flashdeck.modules.flashcards.generator import generate_flashcards
from flashdeck.modules.flashcards.models.flashcards import Deck, Flashcard
from flashdeck.modules.ollama.client import OllamaClient


class FlashcardsGenerator:
    """Generates flashcards through a single Ollama client."""

    def __init__(self, *, client: Optional[OllamaClient] = None) -> None:
        self.client = client or OllamaClient()

    async def generate(self, text: str, model: Optional[str] = None) -> list[Flashcard]:
        return await generate_flashcards(text, model, client=self.client)

    async def list_models(self) -> list[str]:
        return await self.client.list_models()

    async def generate_into(
        self,
        deck: Deck,
        text: str,
        model: Optional[str] = None,
        *,
        replace: bool = False,
    ) -> Deck:
        """Generate cards and return ``deck`` with them added (or swapped in)."""
        cards = await self.generate(text, model)
        return deck.add_cards(cards, replace=replace)

    def generate_sync(self, text: str, model: Optional[str] = None) -> list[Flashcard]:
        return asyncio.run(self.generate(text, model))

    def list_models_sync(self) -> list[str]:
        return asyncio.run(self.list_models())

    def generate_into_sync(
        self,
        deck: Deck,
        text: str,
        model: Optional[str] = None,
        *,
        replace: bool = False,
    ) -> Deck:
        return asyncio.run(self.generate_into(deck, text, model, replace=replace))

    @staticmethod
    def to_jsonable(cards: list[Flashcard]) -> list[dict[str, Any]]:
        return [c.model_dump() for c in cards]
