# src/diff_review/review/filters.py
from fnmatch import fnmatchcase
from collections.abc import Iterable

from diff_review.models.config import DEFAULT_EXCLUDE


def should_review_file(file_path: str, patterns: Iterable[str] = DEFAULT_EXCLUDE) -> bool:
    """Check that the file matches none of the exclude patterns."""
    return not any(fnmatchcase(file_path, pattern) for pattern in patterns)
