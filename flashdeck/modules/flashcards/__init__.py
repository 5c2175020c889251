"""Flashcards module exports."""

from .models.flashcards import Deck, Flashcard
from .generator import generate_flashcards, generate_flashcards_sync
from .normalizer import normalize
from .main import FlashcardsGenerator

__all__ = [
    "Deck",
    "Flashcard",
    "generate_flashcards",
    "generate_flashcards_sync",
    "normalize",
    "FlashcardsGenerator",
]
