"""Plain-text rendering of controller state for the CLI."""

from __future__ import annotations

from typing import List

from blog_summarizer.client.models import ProcessingStep
from blog_summarizer.ui.renderer import RenderedResult, step_icon

# Forces right-to-left display of the Urdu block in bidi-aware terminals.
_RLE = "\u202b"
_PDF = "\u202c"


def render_step(step: ProcessingStep) -> str:
    """Render one ledger line, e.g. ``✔ Generating AI summary: Summary generated``."""
    line = f"{step_icon(step.status)} {step.step}"
    if step.message:
        line += f": {step.message}"
    return line


def render_steps(steps: List[ProcessingStep]) -> str:
    return "\n".join(render_step(s) for s in steps)


def render_result_text(rendered: RenderedResult) -> str:
    """Render a result as labelled sections separated by blank lines."""
    lines = [
        "Blog Information",
        f"  Title      : {rendered.title}",
        f"  Source     : {rendered.source_url}",
    ]
    if rendered.author:
        lines.append(f"  Author     : {rendered.author}")
    lines.append(f"  Word Count : {rendered.word_count}")

    lines += ["", "AI Summary", rendered.summary_english, ""]

    urdu = rendered.urdu
    lines.append(f"[{urdu.lang}] {urdu.toggle_label}")
    lines.append(f"{_RLE}{urdu.text}{_PDF}")
    return "\n".join(lines)
