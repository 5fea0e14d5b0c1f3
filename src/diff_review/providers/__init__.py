# src/diff_review/providers/__init__.py
from .base import ConfigurationError, GenerationError, GenerationResult, LLMProvider
from .openai import OpenAIProvider

__all__ = ["ConfigurationError", "GenerationError", "GenerationResult", "LLMProvider", "OpenAIProvider"]
