from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from flashdeck.apis.deps import get_generator
from flashdeck.core.config import settings
from flashdeck.modules.decks.storage import default_deck_dir, load_deck, save_deck
from flashdeck.modules.flashcards.generator import resolve_model
from flashdeck.modules.flashcards.main import FlashcardsGenerator
from flashdeck.modules.flashcards.models.flashcards import Deck
from .schemas import (
    DeckDirResponse,
    GenerateRequest,
    GenerateResponse,
    LoadDeckRequest,
    ModelsResponse,
    SaveDeckRequest,
)


router = APIRouter()

Generator = Annotated[FlashcardsGenerator, Depends(get_generator)]


@router.post(
    f"/{settings.app.version}/flashcards/generate",
    response_model=GenerateResponse,
    status_code=status.HTTP_200_OK,
    tags=["flashcards"],
)
async def generate(req: GenerateRequest, svc: Generator) -> GenerateResponse:
    cards = await svc.generate(req.text, req.model)
    return GenerateResponse(model=resolve_model(req.model), cards=cards)


@router.get(
    f"/{settings.app.version}/ollama/models",
    response_model=ModelsResponse,
    tags=["ollama"],
)
async def list_models(svc: Generator) -> ModelsResponse:
    return ModelsResponse(models=await svc.list_models())


@router.post(
    f"/{settings.app.version}/decks/save",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["decks"],
)
def save(req: SaveDeckRequest) -> Response:
    save_deck(req.path, req.deck)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    f"/{settings.app.version}/decks/load",
    response_model=Deck,
    tags=["decks"],
)
def load(req: LoadDeckRequest) -> Deck:
    return load_deck(req.path)


@router.get(
    f"/{settings.app.version}/decks/default-dir",
    response_model=DeckDirResponse,
    tags=["decks"],
)
def deck_dir() -> DeckDirResponse:
    return DeckDirResponse(path=default_deck_dir())
