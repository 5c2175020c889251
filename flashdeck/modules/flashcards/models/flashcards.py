"""Pydantic models for flashcards and decks.

``GeneratedCard``/``GeneratedCards`` describe what the model is asked to emit
and are untrusted until validated. ``Flashcard``/``Deck`` are the records the
rest of the application works with and persists.
"""

from __future__ import annotations

import re
from typing import Iterable
from uuid import uuid4

from pydantic import BaseModel, ConfigDict

DEFAULT_DECK_NAME = "Untitled Deck"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9 ]")


def new_card_id() -> str:
    return str(uuid4())


class GeneratedCard(BaseModel):
    """Question/answer pair as emitted by the model."""

    model_config = ConfigDict(strict=True)

    question: str
    answer: str


class GeneratedCards(BaseModel):
    cards: list[GeneratedCard]


class Flashcard(BaseModel):
    """Question/answer flashcard with a system-assigned id.

    Cards are frozen; use ``model_copy(update=...)`` to edit text, which keeps
    the id.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    question: str
    answer: str


class Deck(BaseModel):
    """A named, ordered collection of flashcards.

    Both fields are required so a deck file missing either one is rejected.
    Use ``Deck.empty()`` for a fresh deck.
    """

    name: str
    cards: list[Flashcard]

    @classmethod
    def empty(cls, name: str = DEFAULT_DECK_NAME) -> "Deck":
        return cls(name=name, cards=[])

    def add_cards(self, cards: Iterable[Flashcard], *, replace: bool = False) -> "Deck":
        """Return a copy with ``cards`` appended, or replacing the current ones."""
        incoming = list(cards)
        merged = incoming if replace else [*self.cards, *incoming]
        return Deck(name=self.name, cards=merged)

    def file_stem(self) -> str:
        stem = _UNSAFE_FILENAME_CHARS.sub("", self.name).strip()
        return stem or DEFAULT_DECK_NAME
