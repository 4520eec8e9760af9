"""UI logic shared by the CLI and the web page.

Public re-exports so callers can write::

    from blog_summarizer.ui import SubmissionController, render_result
"""

from blog_summarizer.ui.controller import ControllerState, SubmissionController
from blog_summarizer.ui.renderer import RenderedResult, UrduBlock, render_result, urdu_preview

__all__ = [
    "ControllerState",
    "SubmissionController",
    "RenderedResult",
    "UrduBlock",
    "render_result",
    "urdu_preview",
]
