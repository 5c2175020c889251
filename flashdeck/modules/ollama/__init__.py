from .client import OllamaClient
from .models import GenerateOptions, GenerateRequest

__all__ = ["OllamaClient", "GenerateOptions", "GenerateRequest"]
