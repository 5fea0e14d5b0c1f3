# src/diff_review/config.py
import logging
from pathlib import Path
import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from diff_review.models.config import GenerationConfig, ReviewConfig


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # OpenAI
    openai_api_key: str | None = None
    openai_api_url: str = "https://api.openai.com/v1/chat/completions"
    openai_model: str = "gpt-4o-mini"
    openai_max_tokens: int = 4096
    openai_temperature: float = 0.3
    openai_timeout: float = 120.0

    # Pull request context
    pr_title: str = "No title"
    pr_body: str = "No description"

    # Files
    diff_path: str = "pr_diff.txt"
    output_path: str = "review_output.md"
    review_config_path: str = ".ai-review.yaml"
    log_dir: str | None = None
    log_level: str = "INFO"

    def generation_config(self) -> GenerationConfig:
        return GenerationConfig(
            api_url=self.openai_api_url,
            model=self.openai_model,
            max_tokens=self.openai_max_tokens,
            temperature=self.openai_temperature,
            timeout=self.openai_timeout,
        )


def load_review_config(path: str | Path) -> ReviewConfig:
    """Load .ai-review.yaml or use defaults."""
    path = Path(path)
    if not path.is_file():
        return ReviewConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return ReviewConfig(**data)
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        logger.warning(f"Invalid {path}: {e}")
        return ReviewConfig()
