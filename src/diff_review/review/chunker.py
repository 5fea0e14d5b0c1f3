# src/diff_review/review/chunker.py
from collections.abc import Iterable

from .parser import DiffFile


def chunk_files(files: Iterable[DiffFile], max_chunk_size: int = 15000) -> list[list[DiffFile]]:
    """Group files into batches whose combined raw size stays within max_chunk_size.

    Files are never split; a file larger than the limit gets a batch of its own.
    Input order is preserved within and across batches.
    """
    chunks: list[list[DiffFile]] = []
    current: list[DiffFile] = []
    current_size = 0

    for diff_file in files:
        if current and current_size + diff_file.size > max_chunk_size:
            chunks.append(current)
            current = []
            current_size = 0

        current.append(diff_file)
        current_size += diff_file.size

    if current:
        chunks.append(current)

    return chunks
