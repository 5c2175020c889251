"""Local flashcard generation backed by Ollama."""

__version__ = "0.1.0"
