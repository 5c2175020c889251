"""
Shared pytest fixtures.
The Ollama server is replaced by httpx.MockTransport handlers so no network
or running model is needed.
"""

import json
from typing import Callable

import httpx
import pytest

from flashdeck.modules.ollama.client import OllamaClient

MOCK_BASE_URL = "http://ollama.test"


def generate_body(payload) -> dict:
    """Ollama /api/generate envelope wrapping ``payload`` as a JSON string."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return {"model": "mistral", "response": text, "done": True}


class RecordingHandler:
    """MockTransport handler that answers from a fixed response and keeps requests."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_client():
    """Build an OllamaClient whose HTTP traffic goes to ``respond``."""

    def _make(respond: Callable[[httpx.Request], httpx.Response]):
        handler = RecordingHandler(respond)
        client = OllamaClient(MOCK_BASE_URL, transport=httpx.MockTransport(handler))
        return client, handler

    return _make


@pytest.fixture
def unreachable():
    """Handler that fails like a server that is not running."""

    def _respond(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("All connection attempts failed", request=request)

    return _respond


@pytest.fixture
def cards_payload():
    return {
        "cards": [
            {"question": "What is the capital of France?", "answer": "Paris"},
            {"question": "What river flows through Paris?", "answer": "The Seine"},
        ]
    }
