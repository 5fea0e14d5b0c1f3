# src/diff_review/providers/openai.py
import logging
import httpx
from .base import ConfigurationError, GenerationError, GenerationResult, LLMProvider
from diff_review.models.config import GenerationConfig


logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """Chat-completions client. Makes exactly one request per call, no retries."""

    def __init__(self, api_key: str | None, config: GenerationConfig | None = None):
        self.api_key = api_key
        self.config = config or GenerationConfig()

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def _payload(self, system_prompt: str, user_prompt: str) -> dict:
        return {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
        }

    async def complete(self, system_prompt: str, user_prompt: str) -> GenerationResult:
        if not self.api_key:
            raise ConfigurationError("OPENAI_API_KEY is not set")

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.config.api_url,
                    headers=self._headers(),
                    json=self._payload(system_prompt, user_prompt),
                    timeout=self.config.timeout,
                )
        except httpx.TimeoutException as e:
            return GenerationResult(error=GenerationError(f"Request timed out: {e}"))
        except httpx.HTTPError as e:
            return GenerationResult(error=GenerationError(f"Request failed: {e}"))

        if not response.is_success:
            return GenerationResult(error=GenerationError(
                "Non-success response",
                status_code=response.status_code,
                body=response.text,
            ))

        try:
            data = response.json()
            text = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            return GenerationResult(error=GenerationError(
                f"Malformed response body: {e!r}",
                status_code=response.status_code,
                body=response.text,
            ))

        if not isinstance(text, str):
            return GenerationResult(error=GenerationError(
                "Response contained no message content",
                status_code=response.status_code,
                body=response.text,
            ))

        logger.info(f"OpenAI response length: {len(text)} chars")
        return GenerationResult(text=text)
