# src/diff_review/cli.py
"""Review a diff file and write a markdown report.

Intended for CI: a previous step writes `git diff` output to the diff file,
a later step posts the report. The report file is written exactly once per run,
even when the review fails.
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

from diff_review.config import Settings, load_review_config
from diff_review.providers.openai import OpenAIProvider
from diff_review.review.engine import ReviewEngine, ReviewOutcome
from diff_review.review.prompts import ERROR_REPORT_TEMPLATE


logger = logging.getLogger(__name__)


def read_diff(path: str | Path) -> str | None:
    """Read the diff file, or None if it does not exist."""
    path = Path(path)
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8", errors="replace")


def write_report(path: str | Path, report: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(report, encoding="utf-8")
    logger.info(f"Review complete! Output written to {path}")


async def review_diff(settings: Settings, diff_text: str | None, title: str, description: str) -> ReviewOutcome:
    provider = OpenAIProvider(api_key=settings.openai_api_key, config=settings.generation_config())
    engine = ReviewEngine(
        provider=provider,
        config=load_review_config(settings.review_config_path),
        log_dir=settings.log_dir,
    )
    return await engine.review(diff_text, title=title, description=description)


def run(
    settings: Settings,
    diff_path: str | None = None,
    output_path: str | None = None,
    title: str | None = None,
    description: str | None = None,
) -> int:
    """Run one review and write the report. Returns the process exit code."""
    diff_path = diff_path or settings.diff_path
    output_path = output_path or settings.output_path
    title = title or settings.pr_title or "No title"
    description = description or settings.pr_body or "No description"

    logger.info("Starting AI Code Review...")
    try:
        diff_text = read_diff(diff_path)
        outcome = asyncio.run(review_diff(settings, diff_text, title, description))
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        write_report(output_path, ERROR_REPORT_TEMPLATE.format(error=e))
        return 1

    if outcome.degraded:
        logger.warning(f"Review completed with {outcome.failed_batches} failed chunk(s)")
    write_report(output_path, outcome.report)
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="AI review of a unified diff")
    parser.add_argument("--diff", default=None, help="Path to the diff file (default: DIFF_PATH or pr_diff.txt)")
    parser.add_argument("--output", default=None, help="Path of the markdown report (default: OUTPUT_PATH or review_output.md)")
    parser.add_argument("--title", default=None, help="Pull request title (default: PR_TITLE)")
    parser.add_argument("--description", default=None, help="Pull request description (default: PR_BODY)")
    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level)

    sys.exit(run(
        settings,
        diff_path=args.diff,
        output_path=args.output,
        title=args.title,
        description=args.description,
    ))


if __name__ == "__main__":
    main()
