# src/diff_review/review/engine.py
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from diff_review.models.config import ReviewConfig
from diff_review.providers.base import LLMProvider
from .chunker import chunk_files
from .filters import should_review_file
from .parser import parse_diff
from .prompts import (
    BATCH_ERROR_TEMPLATE,
    EMPTY_DIFF_MESSAGE,
    NO_DIFF_MESSAGE,
    NO_REVIEWABLE_FILES_MESSAGE,
    PART_SEPARATOR,
    SYSTEM_PROMPT,
    build_batch_prompt,
    build_combine_prompt,
    format_file_list,
)


logger = logging.getLogger(__name__)


@dataclass
class ReviewOutcome:
    """Final report of one review run."""
    report: str
    batches: int = 0
    failed_batches: int = 0

    @property
    def degraded(self) -> bool:
        return self.failed_batches > 0


class ReviewEngine:
    def __init__(self, provider: LLMProvider, config: ReviewConfig | None = None, log_dir: str | None = None):
        self.provider = provider
        self.config = config or ReviewConfig()
        self.system_prompt = self.config.system_prompt or SYSTEM_PROMPT
        self.log_dir = Path(log_dir) if log_dir else None

    async def review(
        self,
        diff_text: str | None,
        title: str = "No title",
        description: str = "No description",
    ) -> ReviewOutcome:
        """Review a unified diff and return a single markdown report.

        Generation failures degrade the report instead of raising. Anything else
        (including ConfigurationError) propagates to the caller.
        """
        if diff_text is None:
            logger.error("No diff available")
            return ReviewOutcome(report=NO_DIFF_MESSAGE)

        if not diff_text.strip():
            logger.info("Empty diff, nothing to review")
            return ReviewOutcome(report=EMPTY_DIFF_MESSAGE)

        all_files = parse_diff(diff_text)
        files = [f for f in all_files if should_review_file(f.path, self.config.exclude)]
        logger.info(f"Found {len(all_files)} files, reviewing {len(files)}")

        if not files:
            return ReviewOutcome(report=NO_REVIEWABLE_FILES_MESSAGE)

        chunks = chunk_files(files, self.config.max_chunk_size)
        reviews: list[str] = []
        failed = 0
        prompt_logs: list[str] = []

        for i, chunk in enumerate(chunks, start=1):
            logger.info(f"Reviewing chunk {i}/{len(chunks)}...")
            prompt = build_batch_prompt(chunk, title, description)
            prompt_logs.append(self._format_prompt_log(f"CHUNK {i}/{len(chunks)}", prompt))

            result = await self.provider.complete(self.system_prompt, prompt)
            if result.ok:
                reviews.append(result.text)
            else:
                logger.error(f"Error reviewing chunk {i}: {result.error}")
                failed += 1
                reviews.append(BATCH_ERROR_TEMPLATE.format(
                    file_list=format_file_list(chunk),
                    error=result.error,
                ))

        if failed:
            logger.warning(f"{failed} of {len(chunks)} chunks failed")

        report = await self._combine(reviews, prompt_logs)
        self._save_review_log(prompt_logs)

        return ReviewOutcome(report=report, batches=len(chunks), failed_batches=failed)

    async def _combine(self, reviews: list[str], prompt_logs: list[str]) -> str:
        if len(reviews) == 1:
            return reviews[0]

        prompt = build_combine_prompt(reviews)
        prompt_logs.append(self._format_prompt_log("COMBINE", prompt))

        result = await self.provider.complete(self.system_prompt, prompt)
        if result.ok:
            return result.text

        logger.error(f"Error combining reviews: {result.error}")
        return PART_SEPARATOR.join(reviews)

    def _format_prompt_log(self, label: str, prompt: str) -> str:
        return f"{'=' * 60}\n{label}\n{'=' * 60}\n\n{prompt}"

    def _save_review_log(self, prompt_logs: list[str]) -> None:
        """Save all prompts from one review run into a single log file."""
        if not self.log_dir or not prompt_logs:
            return
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_path = self.log_dir / f"{timestamp}_review.txt"

            header = f"Review time: {timestamp}\nPrompts: {len(prompt_logs)}\n\n"
            log_path.write_text(header + "\n\n".join(prompt_logs), encoding="utf-8")
            logger.info(f"Review log saved: {log_path}")
        except OSError as e:
            logger.warning(f"Failed to save review log: {e}")
