from __future__ import annotations

from pydantic import BaseModel, Field

from flashdeck.modules.flashcards.models.flashcards import Deck, Flashcard


class GenerateRequest(BaseModel):
    text: str = Field(..., description="Source text to turn into flashcards")
    model: str = Field(default="", description="Ollama model; empty uses the default")


class GenerateResponse(BaseModel):
    model: str
    cards: list[Flashcard] = Field(default_factory=list)


class ModelsResponse(BaseModel):
    models: list[str] = Field(default_factory=list)


class SaveDeckRequest(BaseModel):
    path: str
    deck: Deck


class LoadDeckRequest(BaseModel):
    path: str


class DeckDirResponse(BaseModel):
    path: str
