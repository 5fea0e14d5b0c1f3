# src/diff_review/providers/base.py
from abc import ABC, abstractmethod
from dataclasses import dataclass


class ConfigurationError(Exception):
    """Required configuration (e.g. an API key) is missing. Not recoverable per call."""


class GenerationError(Exception):
    """A single generation request failed: transport error, non-2xx status or malformed body."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"HTTP {self.status_code}: {self.body or self.message}"
        return self.message


@dataclass
class GenerationResult:
    text: str | None = None
    error: GenerationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LLMProvider(ABC):
    @abstractmethod
    async def complete(self, system_prompt: str, user_prompt: str) -> GenerationResult:
        """Send one system + user exchange and return the generated text or the failure."""
        pass
