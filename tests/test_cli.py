"""Tests for the blogsum CLI."""

from unittest.mock import patch

import httpx
import respx
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()

_BASE_URL = "http://summarizer.test"
_ENDPOINT = f"{_BASE_URL}/api/summarize"

_PAYLOAD = {
    "id": 9,
    "blog_url": "https://blog.example.com/post",
    "title": "Batteries of the future",
    "summary_english": "Solid-state cells are coming.",
    "summary_urdu": "ایک دو تین چار پانچ چھ سات آٹھ نو دس گیارہ بارہ تیرہ چودہ پندرہ سولہ",
    "created_at": "2025-01-15T10:00:00Z",
    "word_count": 800,
    "author": "Ada",
}


def _summarize(*args: str):
    return runner.invoke(app, ["summarize", *args, "--api-url", _BASE_URL])


def test_summarize_prints_progress_and_result():
    with respx.mock:
        route = respx.post(_ENDPOINT).mock(return_value=httpx.Response(200, json=_PAYLOAD))
        result = _summarize("https://blog.example.com/post")

    assert result.exit_code == 0, result.output
    assert route.call_count == 1
    assert "⟳ Scraping blog content: Extracting content from blog..." in result.output
    assert "✔ Scraping blog content: Content extracted successfully" in result.output
    assert "✔ Translating to Urdu: Translation completed" in result.output
    assert "Title      : Batteries of the future" in result.output
    assert "Author     : Ada" in result.output
    assert "Word Count : 800 words" in result.output
    assert "Click to view Urdu translation" in result.output
    assert "سولہ" not in result.output


def test_summarize_show_urdu_prints_full_translation():
    with respx.mock:
        respx.post(_ENDPOINT).mock(return_value=httpx.Response(200, json=_PAYLOAD))
        result = _summarize("https://blog.example.com/post", "--show-urdu")

    assert result.exit_code == 0, result.output
    assert "Hide Urdu translation" in result.output
    assert "سولہ" in result.output


def test_summarize_server_error_exits_nonzero():
    with respx.mock:
        respx.post(_ENDPOINT).mock(return_value=httpx.Response(500, json={"error": "boom"}))
        result = _summarize("https://blog.example.com/post")

    assert result.exit_code == 1
    assert "✖ Scraping blog content: boom" in result.output
    assert "❌ boom" in result.output
    assert "Title" not in result.output


def test_summarize_invalid_url_sends_nothing():
    with respx.mock(assert_all_called=False) as mock:
        route = mock.post(_ENDPOINT).mock(return_value=httpx.Response(200, json=_PAYLOAD))
        result = _summarize("ftp://example.com")

    assert result.exit_code == 1
    assert route.call_count == 0
    assert "must start with http:// or https://" in result.output


def test_serve_runs_uvicorn():
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(app, ["serve", "--host", "0.0.0.0", "--port", "9000"])

    assert result.exit_code == 0, result.output
    mock_run.assert_called_once_with(
        "blog_summarizer.web.app:app", host="0.0.0.0", port=9000, reload=False
    )
