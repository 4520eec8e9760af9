"""Page endpoints.

Routes
------
GET /               URL form
GET /?url=https://  Run one submission and render its settled state
GET /health         {"status": "ok"}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from blog_summarizer.client.errors import ErrorKind
from blog_summarizer.ui.controller import ControllerState, SubmissionController
from blog_summarizer.ui.renderer import render_result, render_urdu, step_icon

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
templates.env.globals["step_icon"] = step_icon

_VALIDATION_ERRORS = {ErrorKind.EMPTY_INPUT, ErrorKind.INVALID_URL}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _page_context(state: ControllerState) -> dict[str, Any]:
    """Template context for *state*.

    The Urdu toggle is a ``<details>`` element, so both the preview (shown
    collapsed) and the full text (shown expanded) are rendered up front.
    """
    rendered = render_result(state.result, show_translation=False)
    full_urdu = render_urdu(state.result, show_translation=True) if state.result else None
    return {
        "state": state,
        "rendered": rendered,
        "full_urdu": full_urdu,
    }


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/", response_class=HTMLResponse)
async def index(request: Request, url: Optional[str] = None) -> HTMLResponse:
    """Render the form, or submit *url* and render the outcome."""
    if url is None:
        return templates.TemplateResponse(request, "index.html", _page_context(ControllerState()))

    controller = SubmissionController(request.app.state.api_client)
    state = await controller.submit(url)
    status_code = 400 if state.error_kind in _VALIDATION_ERRORS else 200
    return templates.TemplateResponse(
        request, "index.html", _page_context(state), status_code=status_code
    )


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
