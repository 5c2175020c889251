"""Async client for a local Ollama server.

Two calls are supported: a non-streaming ``/api/generate`` round trip and a
``/api/tags`` catalog lookup. Each call opens its own ``httpx.AsyncClient``;
nothing is pooled or retried.
"""

from __future__ import annotations

import enum
from typing import Literal, Optional, Union

import httpx
from pydantic import ValidationError

from flashdeck.core.config import settings
from flashdeck.core.errors import (
    InferenceConnectionError,
    InferenceDecodeError,
    InferenceServerError,
)
from flashdeck.core.logging import get_logger
from flashdeck.modules.ollama.models import GenerateRequest, GenerateResponse, TagsResponse

logger = get_logger(__name__)


class _Unset(enum.Enum):
    TOKEN = 0


_UNSET = _Unset.TOKEN


class OllamaClient:
    """Thin wrapper over the two Ollama endpoints the pipeline needs.

    Args:
        base_url: Server root, e.g. ``http://localhost:11434``. Defaults to
            ``OLLAMA_BASE_URL``.
        timeout: Seconds before giving up; ``None`` waits indefinitely.
            Defaults to ``OLLAMA_TIMEOUT``.
        transport: Optional ``httpx`` transport, used by tests to stand in
            for the server.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Union[Optional[float], Literal[_Unset.TOKEN]] = _UNSET,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or settings.ollama.base_url).rstrip("/")
        self.timeout: Optional[float] = (
            settings.ollama.timeout if timeout is _UNSET else timeout
        )
        self._transport = transport

    @property
    def generate_url(self) -> str:
        return f"{self.base_url}/api/generate"

    @property
    def tags_url(self) -> str:
        return f"{self.base_url}/api/tags"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def generate(self, request: GenerateRequest) -> str:
        """POST a generation request and return the model's raw text output."""
        log_extra = {"model": request.model}
        logger.debug("POST %s", self.generate_url, extra=log_extra)

        try:
            async with self._client() as client:
                response = await client.post(
                    self.generate_url, json=request.model_dump()
                )
        except httpx.TransportError as e:
            logger.warning("Ollama unreachable at %s: %s", self.base_url, e, extra=log_extra)
            raise InferenceConnectionError(
                f"Failed to connect to Ollama. Is it running?\n{e}"
            ) from e

        if not response.is_success:
            logger.warning(
                "Ollama returned status %s", response.status_code, extra=log_extra
            )
            raise InferenceServerError(response.status_code)

        try:
            envelope = GenerateResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise InferenceDecodeError(f"Failed to parse Ollama response: {e}") from e

        logger.debug("Received %d characters", len(envelope.response), extra=log_extra)
        return envelope.response

    async def list_models(self) -> list[str]:
        """Return the model names the server reports, in server order."""
        logger.debug("GET %s", self.tags_url)

        try:
            async with self._client() as client:
                response = await client.get(self.tags_url)
        except httpx.TransportError as e:
            logger.warning("Ollama unreachable at %s: %s", self.base_url, e)
            raise InferenceConnectionError("Cannot connect to Ollama") from e

        if not response.is_success:
            logger.warning("Ollama tags returned status %s", response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise InferenceDecodeError("Invalid response from Ollama") from e

        catalog = TagsResponse.model_validate(body if isinstance(body, dict) else {})
        return catalog.names()
