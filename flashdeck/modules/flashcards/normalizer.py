"""Turn raw model output into Flashcards.

The payload must decode as ``{"cards": [{"question": str, "answer": str}]}``.
A single bad entry rejects the whole batch.
"""

from __future__ import annotations

from pydantic import ValidationError

from flashdeck.core.errors import MalformedOutputError
from flashdeck.modules.flashcards.models.flashcards import (
    Flashcard,
    GeneratedCards,
    new_card_id,
)


def parse_generated(raw_response_text: str) -> GeneratedCards:
    try:
        return GeneratedCards.model_validate_json(raw_response_text)
    except ValidationError as e:
        raise MalformedOutputError(
            f"LLM returned invalid JSON. Try regenerating.\n{e}"
        ) from e


def normalize(raw_response_text: str) -> list[Flashcard]:
    """Validate ``raw_response_text`` and assign fresh ids, keeping model order."""
    generated = parse_generated(raw_response_text)
    return [
        Flashcard(id=new_card_id(), question=c.question, answer=c.answer)
        for c in generated.cards
    ]
