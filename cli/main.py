"""Blog summarizer CLI: entry-point for submitting URLs and serving the page.

Usage:
    python cli/main.py --help

Commands:
    summarize  → submit one blog URL and print the summary
    serve      → run the web page with uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from blog_summarizer.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
from typing import Optional

import typer

from blog_summarizer.client.api import SummarizeClient
from blog_summarizer.client.models import ProcessingStep, StepStatus
from blog_summarizer.config import settings
from blog_summarizer.ui.controller import ControllerState, Listener, SubmissionController
from blog_summarizer.ui.renderer import render_result
from cli.rendering import render_result_text, render_step

app = typer.Typer(
    name="blogsum",
    help="Summarize a blog post in English with an Urdu translation.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _echo_step_changes() -> Listener:
    """Return a listener that prints each ledger line when it changes."""
    seen: dict[int, ProcessingStep] = {}

    def _listener(state: ControllerState) -> None:
        for index, step in enumerate(state.steps):
            if seen.get(index) != step:
                seen[index] = step
                if step.status is not StepStatus.PENDING:
                    typer.echo(render_step(step))

    return _listener


async def _run_submission(
    url: str, api_url: Optional[str], show_urdu: bool
) -> ControllerState:
    async with SummarizeClient(base_url=api_url) as client:
        controller = SubmissionController(client)
        if show_urdu:
            controller.toggle_translation()
        controller.subscribe(_echo_step_changes())
        return await controller.submit(url)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command("summarize")
def summarize(
    url: str = typer.Argument(..., help="Blog URL to summarize."),
    show_urdu: bool = typer.Option(
        False, "--show-urdu", help="Print the full Urdu translation instead of a preview."
    ),
    api_url: Optional[str] = typer.Option(
        None, "--api-url", help="Summarizer base URL (overrides SUMMARIZER_API_URL)."
    ),
) -> None:
    """Submit URL to the summarizer and print the result."""
    typer.echo(f"[summarize] Submitting {url!r} …")
    state = asyncio.run(_run_submission(url, api_url, show_urdu))

    if state.error:
        typer.echo(f"❌ {state.error}")
        raise typer.Exit(code=1)

    rendered = render_result(state.result, state.show_translation)
    if rendered is None:
        typer.echo("[summarize] The summarizer returned no result.")
        raise typer.Exit(code=1)

    typer.echo("")
    typer.echo(render_result_text(rendered))


@app.command("serve")
def serve(
    host: str = typer.Option(settings.web_host, help="Interface to bind."),
    port: int = typer.Option(settings.web_port, help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    """Run the summarizer web page."""
    import uvicorn

    typer.echo(f"[serve] Web page on http://{host}:{port} → {settings.summarize_url}")
    uvicorn.run("blog_summarizer.web.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
