"""
API tests for flashdeck/apis/flashcards/main.py via FastAPI TestClient.
The generator dependency is overridden to talk to a mocked Ollama server.
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from flashdeck.apis.deps import get_generator
from flashdeck.core.config import settings
from flashdeck.modules.flashcards.main import FlashcardsGenerator
from main import create_app

from conftest import generate_body

API = f"/{settings.app.version}"


@pytest.fixture
def api(make_client):
    """Return a factory: ``api(respond)`` -> TestClient wired to ``respond``."""

    def _api(respond):
        client, handler = make_client(respond)
        app = create_app()
        app.dependency_overrides[get_generator] = lambda: FlashcardsGenerator(client=client)
        return TestClient(app), handler

    return _api


def test_root_reports_status(api):
    http, _ = api(lambda request: httpx.Response(500))
    body = http.get("/").json()
    assert body["status"] == "ok"
    assert body["app"] == settings.app.name


# ────────────────────────────────────────────────────────────────────────────
# Generation
# ────────────────────────────────────────────────────────────────────────────

class TestGenerate:

    def test_success(self, api, cards_payload):
        http, handler = api(lambda request: httpx.Response(200, json=generate_body(cards_payload)))

        resp = http.post(f"{API}/flashcards/generate", json={"text": "France", "model": ""})

        assert resp.status_code == 200
        body = resp.json()
        assert body["model"] == "mistral"
        assert [c["answer"] for c in body["cards"]] == ["Paris", "The Seine"]
        assert all(c["id"] for c in body["cards"])
        assert handler.last_json["model"] == "mistral"

    def test_model_is_optional(self, api, cards_payload):
        http, handler = api(lambda request: httpx.Response(200, json=generate_body(cards_payload)))
        resp = http.post(f"{API}/flashcards/generate", json={"text": "France"})
        assert resp.status_code == 200
        assert handler.last_json["model"] == "mistral"

    def test_connection_failure_is_503(self, api, unreachable):
        http, _ = api(unreachable)
        resp = http.post(f"{API}/flashcards/generate", json={"text": "France"})
        assert resp.status_code == 503
        assert "Is it running?" in resp.json()["detail"]

    def test_malformed_output_is_502(self, api):
        http, _ = api(lambda request: httpx.Response(200, json={"response": "not json"}))
        resp = http.post(f"{API}/flashcards/generate", json={"text": "France"})
        assert resp.status_code == 502
        assert "Try regenerating" in resp.json()["detail"]

    def test_server_error_is_502(self, api):
        http, _ = api(lambda request: httpx.Response(404, json={"error": "no model"}))
        resp = http.post(f"{API}/flashcards/generate", json={"text": "France", "model": "x"})
        assert resp.status_code == 502
        assert resp.json()["detail"] == "Ollama returned status: 404"


# ────────────────────────────────────────────────────────────────────────────
# Models
# ────────────────────────────────────────────────────────────────────────────

def test_models(api):
    http, _ = api(
        lambda request: httpx.Response(
            200, json={"models": [{"name": "a"}, {"not_name": "x"}, {"name": "b"}]}
        )
    )
    resp = http.get(f"{API}/ollama/models")
    assert resp.status_code == 200
    assert resp.json() == {"models": ["a", "b"]}


def test_models_unreachable(api, unreachable):
    http, _ = api(unreachable)
    resp = http.get(f"{API}/ollama/models")
    assert resp.status_code == 503
    assert resp.json()["detail"] == "Cannot connect to Ollama"


# ────────────────────────────────────────────────────────────────────────────
# Decks
# ────────────────────────────────────────────────────────────────────────────

class TestDecks:

    @pytest.fixture
    def http(self, api):
        client, _ = api(lambda request: httpx.Response(500))
        return client

    def test_save_then_load(self, http, tmp_path):
        path = tmp_path / "deck.json"
        deck = {
            "name": "Geo",
            "cards": [{"id": "c-1", "question": "Capital of France?", "answer": "Paris"}],
        }

        saved = http.post(f"{API}/decks/save", json={"path": str(path), "deck": deck})
        assert saved.status_code == 204
        assert json.loads(path.read_text(encoding="utf-8")) == deck

        loaded = http.post(f"{API}/decks/load", json={"path": str(path)})
        assert loaded.status_code == 200
        assert loaded.json() == deck

    def test_load_missing_file_is_400(self, http, tmp_path):
        resp = http.post(f"{API}/decks/load", json={"path": str(tmp_path / "nope.json")})
        assert resp.status_code == 400
        assert resp.json()["detail"].startswith("Failed to read")

    def test_load_invalid_file_is_400(self, http, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"cards": 1}', encoding="utf-8")
        resp = http.post(f"{API}/decks/load", json={"path": str(path)})
        assert resp.status_code == 400
        assert resp.json()["detail"].startswith("Invalid deck file")

    def test_default_dir(self, http, tmp_path, monkeypatch):
        monkeypatch.setattr(settings.decks, "home", str(tmp_path))
        resp = http.get(f"{API}/decks/default-dir")
        assert resp.status_code == 200
        assert resp.json() == {"path": str(tmp_path / "FlashcardDecks")}
        assert (tmp_path / "FlashcardDecks").is_dir()
