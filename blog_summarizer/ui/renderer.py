"""Result renderer: the display model of a :class:`SummaryResult`.

Rendering is pure: the same result and visibility flag always produce the
same :class:`RenderedResult`, and nothing here touches the network.
"""

from __future__ import annotations

from dataclasses import dataclass

from blog_summarizer.client.models import StepStatus, SummaryResult
from blog_summarizer.config import settings

ELLIPSIS = "..."

_STEP_ICONS = {
    StepStatus.PENDING: "○",
    StepStatus.PROCESSING: "⟳",
    StepStatus.COMPLETED: "✔",
    StepStatus.ERROR: "✖",
}


def step_icon(status: StepStatus) -> str:
    return _STEP_ICONS[status]


@dataclass(frozen=True)
class UrduBlock:
    text: str
    is_preview: bool
    toggle_label: str
    direction: str = "rtl"
    lang: str = "ur"


@dataclass(frozen=True)
class RenderedResult:
    title: str
    source_url: str
    author: str | None
    word_count: str
    summary_english: str
    urdu: UrduBlock


def urdu_preview(text: str, words: int | None = None) -> str:
    """Return the first *words* whitespace-separated tokens of *text* plus an ellipsis."""
    limit = settings.urdu_preview_words if words is None else words
    return " ".join(text.split()[:limit]) + ELLIPSIS


def toggle_label(show_translation: bool) -> str:
    return f"{'Hide' if show_translation else 'Click to view'} Urdu translation"


def render_urdu(result: SummaryResult, show_translation: bool) -> UrduBlock:
    if show_translation:
        text = result.summary_urdu
    else:
        text = urdu_preview(result.summary_urdu)
    return UrduBlock(
        text=text,
        is_preview=not show_translation,
        toggle_label=toggle_label(show_translation),
    )


def render_result(result: SummaryResult | None, show_translation: bool) -> RenderedResult | None:
    """Build the display model for *result*; ``None`` when there is no result."""
    if result is None:
        return None
    return RenderedResult(
        title=result.title,
        source_url=result.blog_url,
        author=result.author or None,
        word_count=f"{result.word_count} words",
        summary_english=result.summary_english,
        urdu=render_urdu(result, show_translation),
    )
