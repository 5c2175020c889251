"""Flashcard generator backed by a local Ollama model.

This module exposes a simple async function that returns validated
``Flashcard`` records for a piece of source text. The whole call either
succeeds with every card or raises a ``GenerationError``.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from flashdeck.core.config import settings
from flashdeck.core.logging import get_logger
from flashdeck.modules.flashcards.models.flashcards import Flashcard
from flashdeck.modules.flashcards.normalizer import normalize
from flashdeck.modules.ollama.client import OllamaClient
from flashdeck.modules.ollama.models import GenerateOptions, GenerateRequest

logger = get_logger(__name__)

PROMPT_TEMPLATE = """You are a flashcard generator. Analyze the following text and create high-quality study flashcards.

Rules:
- Extract the most important concepts, facts, and relationships.
- Each flashcard must have a clear, specific question and a concise, accurate answer.
- Aim for 5-15 flashcards depending on content density.
- Questions should test understanding, not just recall.
- Answers should be brief but complete.

Respond with ONLY valid JSON in this exact format:
{{"cards": [{{"question": "...", "answer": "..."}}, ...]}}

Text to analyze:
{text}"""


def build_prompt(text: str) -> str:
    return PROMPT_TEMPLATE.format(text=text)


def resolve_model(model: Optional[str]) -> str:
    return model or settings.ollama.default_model


def build_request(text: str, model: Optional[str] = None) -> GenerateRequest:
    return GenerateRequest(
        model=resolve_model(model),
        prompt=build_prompt(text),
        stream=False,
        format="json",
        options=GenerateOptions(
            temperature=settings.ollama.temperature,
            num_predict=settings.ollama.num_predict,
        ),
    )


async def generate_flashcards(
    text: str,
    model: Optional[str] = None,
    *,
    client: Optional[OllamaClient] = None,
) -> list[Flashcard]:
    """Generate and validate flashcards for ``text``.

    An empty ``model`` falls back to ``OLLAMA_DEFAULT_MODEL``. Transport and
    validation errors propagate unchanged.
    """
    request = build_request(text, model)
    raw = await (client or OllamaClient()).generate(request)
    cards = normalize(raw)
    logger.info("Generated %d flashcards", len(cards), extra={"model": request.model})
    return cards


def generate_flashcards_sync(
    text: str,
    model: Optional[str] = None,
    *,
    client: Optional[OllamaClient] = None,
) -> list[Flashcard]:
    """Synchronous wrapper if an event loop is unavailable."""
    return asyncio.run(generate_flashcards(text, model, client=client))
