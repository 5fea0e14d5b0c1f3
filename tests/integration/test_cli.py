# tests/integration/test_cli.py
import pytest
from diff_review.cli import main, read_diff, run
from diff_review.config import Settings
from diff_review.review.prompts import EMPTY_DIFF_MESSAGE, NO_DIFF_MESSAGE, NO_REVIEWABLE_FILES_MESSAGE


API_URL = "https://api.openai.com/v1/chat/completions"

SOURCE_DIFF = """diff --git a/src/a.ts b/src/a.ts
index 1111111..2222222 100644
--- a/src/a.ts
+++ b/src/a.ts
@@ -1,2 +1,3 @@
 const a = 1;
+const b = 2;
 export { a };
"""

LOCK_DIFF = """diff --git a/yarn.lock b/yarn.lock
index 1111111..2222222 100644
--- a/yarn.lock
+++ b/yarn.lock
@@ -1 +1 @@
-lodash@4.17.20
+lodash@4.17.21
"""


def big_section(path: str) -> str:
    return f"diff --git a/{path} b/{path}\n@@ -1 +1 @@\n+" + "x" * 9000 + "\n"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        openai_api_key="test-key",
        diff_path=str(tmp_path / "pr_diff.txt"),
        output_path=str(tmp_path / "out" / "review_output.md"),
        review_config_path=str(tmp_path / ".ai-review.yaml"),
        pr_title="Add b",
        pr_body="Adds b",
    )


def read_output(settings: Settings) -> str:
    with open(settings.output_path, encoding="utf-8") as f:
        return f.read()


def write_diff(settings: Settings, text: str) -> None:
    with open(settings.diff_path, "w", encoding="utf-8") as f:
        f.write(text)


def test_read_diff_missing_file(tmp_path):
    assert read_diff(tmp_path / "missing.txt") is None


def test_missing_diff_file(settings):
    assert run(settings) == 0
    assert read_output(settings) == NO_DIFF_MESSAGE


def test_empty_diff(settings):
    write_diff(settings, "")

    assert run(settings) == 0
    assert read_output(settings) == EMPTY_DIFF_MESSAGE


def test_lock_only_diff(settings):
    write_diff(settings, LOCK_DIFF)

    assert run(settings) == 0
    assert read_output(settings) == NO_REVIEWABLE_FILES_MESSAGE


def test_review_written_verbatim(settings, httpx_mock):
    write_diff(settings, SOURCE_DIFF + LOCK_DIFF)
    httpx_mock.add_response(url=API_URL, json={"choices": [{"message": {"content": "### Summary\nFine."}}]})

    assert run(settings) == 0
    assert read_output(settings) == "### Summary\nFine."
    assert len(httpx_mock.get_requests()) == 1


def test_partial_failure_still_succeeds(settings, httpx_mock):
    write_diff(settings, big_section("a.py") + big_section("b.py"))
    httpx_mock.add_response(url=API_URL, json={"choices": [{"message": {"content": "review A"}}]})
    httpx_mock.add_response(url=API_URL, status_code=500, text="server error")
    httpx_mock.add_response(url=API_URL, status_code=500, text="server error")

    assert run(settings) == 0
    report = read_output(settings)
    assert report.startswith("review A")
    assert "*Error reviewing files: b.py*" in report


def test_missing_api_key_writes_error_report(settings):
    settings.openai_api_key = None
    write_diff(settings, SOURCE_DIFF)

    assert run(settings) == 1
    assert read_output(settings) == "Error during code review: OPENAI_API_KEY is not set"


def test_missing_api_key_not_needed_for_empty_diff(settings):
    settings.openai_api_key = None
    write_diff(settings, "\n")

    assert run(settings) == 0
    assert read_output(settings) == EMPTY_DIFF_MESSAGE


def test_unexpected_error_writes_error_report(settings, monkeypatch):
    write_diff(settings, SOURCE_DIFF)

    def explode(diff_text):
        raise RuntimeError("parser exploded")

    monkeypatch.setattr("diff_review.review.engine.parse_diff", explode)

    assert run(settings) == 1
    assert read_output(settings) == "Error during code review: parser exploded"


def test_arguments_override_settings(settings, tmp_path, httpx_mock):
    diff_path = tmp_path / "other.diff"
    diff_path.write_text(SOURCE_DIFF, encoding="utf-8")
    output_path = tmp_path / "other.md"
    httpx_mock.add_response(url=API_URL, json={"choices": [{"message": {"content": "ok"}}]})

    code = run(settings, diff_path=str(diff_path), output_path=str(output_path), title="Custom title")

    assert code == 0
    assert output_path.read_text(encoding="utf-8") == "ok"
    assert b"**Title:** Custom title" in httpx_mock.get_request().content


def test_main_exits_with_run_status(settings, tmp_path, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as exc_info:
        main(["--output", settings.output_path])

    assert exc_info.value.code == 0
    assert read_output(settings) == NO_DIFF_MESSAGE


def test_log_dir_that_is_a_file_still_writes_review(settings, tmp_path, httpx_mock):
    log_file = tmp_path / "logs"
    log_file.write_text("", encoding="utf-8")
    settings.log_dir = str(log_file)
    write_diff(settings, SOURCE_DIFF)
    httpx_mock.add_response(url=API_URL, json={"choices": [{"message": {"content": "### Summary\nFine."}}]})

    assert run(settings) == 0
    assert read_output(settings) == "### Summary\nFine."
