"""Wire models for the Ollama HTTP API.

Request models mirror ``POST /api/generate``. Response models are decoded
leniently where the catalog is concerned: unknown keys are ignored and
malformed catalog entries collapse to ``name=None`` so callers can skip them.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerateOptions(BaseModel):
    temperature: float
    num_predict: int


class GenerateRequest(BaseModel):
    model: str
    prompt: str
    stream: bool = False
    format: Literal["json"] = "json"
    options: GenerateOptions


class GenerateResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    response: str


class ModelTag(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _name_must_be_text(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None


class TagsResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    models: list[ModelTag] = Field(default_factory=list)

    @field_validator("models", mode="before")
    @classmethod
    def _models_must_be_list(cls, value: Any) -> list[Any]:
        if not isinstance(value, list):
            return []
        return [item if isinstance(item, dict) else {} for item in value]

    def names(self) -> list[str]:
        return [m.name for m in self.models if m.name is not None]
