from collections.abc import Sequence

from .parser import DiffFile


NO_DIFF_MESSAGE = "No changes detected or diff file not available."
EMPTY_DIFF_MESSAGE = "No changes to review."
NO_REVIEWABLE_FILES_MESSAGE = "No reviewable code changes found (only binary/config files changed)."
ERROR_REPORT_TEMPLATE = "Error during code review: {error}"
BATCH_ERROR_TEMPLATE = "*Error reviewing files: {file_list}* ({error})"
PART_SEPARATOR = "\n\n---\n\n"


SYSTEM_PROMPT = """You are an expert code reviewer.
Your role is to provide constructive, actionable feedback on pull request changes.

## Review Guidelines
Focus on:
1. **Bugs & Logic Errors**: Runtime errors, logic flaws, edge cases, null access
2. **Security Issues**: Credential exposure, injection risks, insecure data handling
3. **Performance**: Unnecessary work, memory leaks, inefficient algorithms
4. **Code Quality**: Readability, maintainability, error handling, types

## Response Format
Provide your review in this exact markdown format:

### Summary
A brief 1-2 sentence summary of the overall changes.

### Findings

#### Critical Issues
- **[filename:line]** Description of critical issue that must be fixed

#### Warnings
- **[filename:line]** Description of potential problem

#### Suggestions
- **[filename:line]** Improvement suggestion

#### What's Good
- Brief praise for well-written code patterns

### Recommendation
Your overall recommendation: **Approve**, **Request Changes**, or **Comment**

If there are no issues in a category, omit that section. Be concise and specific."""


BATCH_PROMPT = """## Pull Request
**Title:** {title}
**Description:** {description}

## Files Changed
{file_list}

## Diff
```diff
{diff_text}
```

Please review these changes and provide feedback."""


COMBINE_PROMPT = """You reviewed a PR in multiple parts. Combine these reviews into a single cohesive review:

{parts}

Provide a single unified review following the same format (Summary, Findings, Recommendation)."""


def format_file_list(files: Sequence[DiffFile]) -> str:
    return ", ".join(f.path for f in files)


def build_batch_prompt(files: Sequence[DiffFile], title: str, description: str) -> str:
    """Build the user prompt for one batch of files."""
    return BATCH_PROMPT.format(
        title=title,
        description=description,
        file_list=format_file_list(files),
        diff_text="\n\n".join(f.raw for f in files),
    )


def build_combine_prompt(reviews: Sequence[str]) -> str:
    """Build the prompt that merges per-batch reviews, labeled by part number."""
    parts = "\n\n".join(f"## Part {i}\n{review}" for i, review in enumerate(reviews, start=1))
    return COMBINE_PROMPT.format(parts=parts)
