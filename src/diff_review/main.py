# src/diff_review/main.py
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from fastapi import FastAPI
from pydantic import BaseModel

from diff_review import __version__
from diff_review.config import Settings, load_review_config
from diff_review.providers.base import LLMProvider
from diff_review.providers.openai import OpenAIProvider
from diff_review.review.engine import ReviewEngine
from diff_review.review.prompts import ERROR_REPORT_TEMPLATE


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=get_settings().log_level)
    logger.info("Diff Review starting...")
    yield
    logger.info("Diff Review shutting down...")


app = FastAPI(title="Diff Review", lifespan=lifespan)


class ReviewRequest(BaseModel):
    diff: str | None = None
    title: str | None = None
    description: str | None = None


class ReviewResponse(BaseModel):
    status: str
    report: str
    batches: int = 0
    failed_batches: int = 0
    error: str | None = None


def get_provider(settings: Settings) -> LLMProvider:
    return OpenAIProvider(api_key=settings.openai_api_key, config=settings.generation_config())


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.post("/api/review", response_model=ReviewResponse)
async def review(request: ReviewRequest):
    """Review a unified diff and return the markdown report."""
    settings = get_settings()

    try:
        engine = ReviewEngine(
            provider=get_provider(settings),
            config=load_review_config(settings.review_config_path),
            log_dir=settings.log_dir,
        )
        outcome = await engine.review(
            request.diff,
            title=request.title or settings.pr_title or "No title",
            description=request.description or settings.pr_body or "No description",
        )
    except Exception as e:
        logger.exception(f"Review failed: {e}")
        return ReviewResponse(
            status="error",
            report=ERROR_REPORT_TEMPLATE.format(error=e),
            error=str(e),
        )

    return ReviewResponse(
        status="completed",
        report=outcome.report,
        batches=outcome.batches,
        failed_batches=outcome.failed_batches,
    )
