"""Tests for the result renderer and the CLI text rendering."""

from __future__ import annotations

import pytest

from blog_summarizer.client.models import ProcessingStep, StepStatus, SummaryResult
from blog_summarizer.ui.renderer import render_result, toggle_label, urdu_preview
from cli.rendering import render_result_text, render_step


def _result(**overrides) -> SummaryResult:
    base = {
        "id": 3,
        "blog_url": "https://blog.example.com/post",
        "title": "A post",
        "summary_english": "Line one.\nLine two.",
        "summary_urdu": "a b c d e f g h i j k l m n o p",
        "created_at": "2025-01-15T10:00:00Z",
        "word_count": 512,
    }
    base.update(overrides)
    return SummaryResult(**base)


class TestUrduPreview:
    def test_sixteen_tokens_truncate_to_fifteen(self) -> None:
        assert urdu_preview("a b c d e f g h i j k l m n o p") == (
            "a b c d e f g h i j k l m n o..."
        )

    def test_short_text_still_gets_ellipsis(self) -> None:
        assert urdu_preview("ایک دو تین") == "ایک دو تین..."

    def test_collapses_any_whitespace(self) -> None:
        assert urdu_preview("a\nb\t c", words=2) == "a b..."


class TestRenderResult:
    def test_no_result_renders_nothing(self) -> None:
        assert render_result(None, show_translation=False) is None
        assert render_result(None, show_translation=True) is None

    def test_hidden_translation_shows_preview(self) -> None:
        rendered = render_result(_result(), show_translation=False)

        assert rendered is not None
        assert rendered.urdu.is_preview is True
        assert rendered.urdu.text == "a b c d e f g h i j k l m n o..."
        assert rendered.urdu.toggle_label == "Click to view Urdu translation"
        assert rendered.urdu.direction == "rtl"
        assert rendered.urdu.lang == "ur"

    def test_shown_translation_is_full_text(self) -> None:
        rendered = render_result(_result(), show_translation=True)

        assert rendered.urdu.is_preview is False
        assert rendered.urdu.text == "a b c d e f g h i j k l m n o p"
        assert rendered.urdu.toggle_label == "Hide Urdu translation"
        assert rendered.urdu.direction == "rtl"
        assert rendered.urdu.lang == "ur"

    def test_fields_and_line_breaks_are_kept(self) -> None:
        rendered = render_result(_result(author="Ada"), show_translation=False)

        assert rendered.title == "A post"
        assert rendered.source_url == "https://blog.example.com/post"
        assert rendered.author == "Ada"
        assert rendered.word_count == "512 words"
        assert rendered.summary_english == "Line one.\nLine two."

    @pytest.mark.parametrize("author", [None, ""])
    def test_missing_author_is_omitted(self, author) -> None:
        assert render_result(_result(author=author), show_translation=False).author is None

    def test_toggle_label(self) -> None:
        assert toggle_label(True).startswith("Hide")
        assert toggle_label(False).startswith("Click to view")


class TestCliRendering:
    def test_step_line_includes_icon_and_message(self) -> None:
        step = ProcessingStep("Generating AI summary", StepStatus.COMPLETED, "Summary generated")
        assert render_step(step) == "✔ Generating AI summary: Summary generated"

    def test_pending_step_without_message(self) -> None:
        assert render_step(ProcessingStep("Translating to Urdu")) == "○ Translating to Urdu"

    def test_result_text_sections(self) -> None:
        text = render_result_text(render_result(_result(author="Ada"), show_translation=False))

        assert "Title      : A post" in text
        assert "Source     : https://blog.example.com/post" in text
        assert "Author     : Ada" in text
        assert "Word Count : 512 words" in text
        assert "Line one.\nLine two." in text
        assert "[ur] Click to view Urdu translation" in text
        assert "a b c d e f g h i j k l m n o..." in text

    def test_result_text_without_author(self) -> None:
        text = render_result_text(render_result(_result(), show_translation=True))
        assert "Author" not in text
        assert "a b c d e f g h i j k l m n o p" in text
