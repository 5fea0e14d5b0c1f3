# src/diff_review/review/parser.py
import re
import logging
from dataclasses import dataclass, field
from typing import NamedTuple


logger = logging.getLogger(__name__)

FILE_BOUNDARY = re.compile(r"^(?=diff --git)", re.MULTILINE)
PATH_PAIR = re.compile(r"a/(.+?) b/([^\r\n]+)")
HUNK_HEADER = re.compile(r"@@ -\d+(?:,\d+)? \+(\d+)")


class AddedLine(NamedTuple):
    line: int
    content: str


@dataclass
class DiffFile:
    path: str
    raw: str
    additions: list[AddedLine] = field(default_factory=list)
    deletions: list[str] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.raw)


def split_sections(diff_text: str) -> list[str]:
    """Split a multi-file patch into per-file sections, each starting at `diff --git`."""
    return [section for section in FILE_BOUNDARY.split(diff_text) if section]


def parse_section(section: str) -> DiffFile | None:
    """Parse one file section. Returns None when the header has no a/ b/ path pair."""
    # CRLF patches: the terminator is not part of the path or line content
    lines = [line.rstrip("\r") for line in section.split("\n")]
    header = PATH_PAIR.search(lines[0])
    if not header:
        logger.debug(f"Skipping section with unrecognized header: {lines[0][:80]!r}")
        return None

    diff_file = DiffFile(path=header.group(2), raw=section)
    current_line = 0

    for line in lines:
        if line.startswith("@@"):
            match = HUNK_HEADER.match(line)
            if match:
                current_line = int(match.group(1)) - 1
        elif line.startswith("+") and not line.startswith("+++"):
            current_line += 1
            diff_file.additions.append(AddedLine(current_line, line[1:]))
        elif line.startswith("-") and not line.startswith("---"):
            # removed lines have no position in the new file
            diff_file.deletions.append(line[1:])
        elif line.startswith("\\"):
            continue
        else:
            current_line += 1

    return diff_file


def parse_diff(diff_text: str) -> list[DiffFile]:
    """Parse unified diff text (as produced by `git diff`) into per-file changes."""
    files = []
    for section in split_sections(diff_text):
        diff_file = parse_section(section)
        if diff_file is not None:
            files.append(diff_file)
    return files
