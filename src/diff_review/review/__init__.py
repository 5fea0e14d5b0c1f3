from .parser import parse_diff, DiffFile, AddedLine
from .filters import should_review_file
from .chunker import chunk_files
from .prompts import build_batch_prompt, build_combine_prompt
from .engine import ReviewEngine, ReviewOutcome

__all__ = [
    "parse_diff",
    "DiffFile",
    "AddedLine",
    "should_review_file",
    "chunk_files",
    "build_batch_prompt",
    "build_combine_prompt",
    "ReviewEngine",
    "ReviewOutcome",
]
