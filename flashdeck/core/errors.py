"""Exception hierarchy shared by the generation pipeline and its collaborators.

Every exception carries a human-readable message; ``str(exc)`` is what the API
and CLI hand back to the user.
"""

from __future__ import annotations


class FlashdeckError(Exception):
    """Base class for all flashdeck failures."""

    pass


class GenerationError(FlashdeckError):
    """Any failure while turning source text into flashcards."""

    pass


class TransportError(GenerationError):
    """The inference server could not be talked to successfully."""

    pass


class InferenceConnectionError(TransportError):
    """The inference server is unreachable."""

    pass


class InferenceServerError(TransportError):
    """The inference server answered with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Ollama returned status: {status_code}")


class InferenceDecodeError(TransportError):
    """The response envelope did not have the expected shape."""

    pass


class MalformedOutputError(GenerationError):
    """The model payload did not match ``{cards: [{question, answer}]}``."""

    pass


class PersistenceError(FlashdeckError):
    """A deck file could not be read, written or parsed."""

    pass


class StorageConfigError(PersistenceError):
    """The default deck directory cannot be resolved on this machine."""

    pass
