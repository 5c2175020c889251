from .flashcards import (
    DEFAULT_DECK_NAME,
    Deck,
    Flashcard,
    GeneratedCard,
    GeneratedCards,
    new_card_id,
)

__all__ = [
    "DEFAULT_DECK_NAME",
    "Deck",
    "Flashcard",
    "GeneratedCard",
    "GeneratedCards",
    "new_card_id",
]
