from pydantic import BaseModel, Field


DEFAULT_EXCLUDE = [
    # lock files
    "*.lock",
    "package-lock.json",
    "*/package-lock.json",
    "yarn.lock",
    "*/yarn.lock",
    "pnpm-lock.yaml",
    "*/pnpm-lock.yaml",
    # images and fonts
    "*.png",
    "*.jpg",
    "*.jpeg",
    "*.gif",
    "*.svg",
    "*.ico",
    "*.woff*",
    "*.ttf",
    "*.eot",
    # build output
    "*.min.*",
    "*.map",
    # vendored dependencies
    "node_modules/*",
    "*/node_modules/*",
    "vendor/*",
    "*/vendor/*",
]


class ReviewConfig(BaseModel):
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    max_chunk_size: int = Field(default=15000, gt=0)
    # None selects the built-in review prompt
    system_prompt: str | None = None


class GenerationConfig(BaseModel):
    api_url: str = "https://api.openai.com/v1/chat/completions"
    model: str = "gpt-4o-mini"
    max_tokens: int = Field(default=4096, gt=0)
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    timeout: float = Field(default=120.0, gt=0)
