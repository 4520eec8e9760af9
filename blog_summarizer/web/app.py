"""FastAPI application factory for the summarizer web page.

Lifespan
--------
On startup the app opens a single ``httpx.AsyncClient`` (shared across all
requests via ``request.app.state.api_client``) for the summarize API.  On
shutdown it closes the client cleanly.

Routes
------
    /         URL form, progress ledger and rendered result
    /health   liveness check
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from blog_summarizer.client.api import SummarizeClient
from blog_summarizer.config import settings
from blog_summarizer.log import log
from blog_summarizer.web.routers import page as page_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the API client on startup and close it on shutdown."""
    http = httpx.AsyncClient(timeout=settings.request_timeout)
    app.state.api_client = SummarizeClient(http=http)
    log.info("Web page started; summarize endpoint %s", app.state.api_client.endpoint)
    try:
        yield
    finally:
        await http.aclose()


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Blog Summarizer",
        description=(
            "Submit a blog URL to the summarization service and view the "
            "English summary with its Urdu translation."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(page_router.router, tags=["page"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn blog_summarizer.web.app:app --reload
app = create_app()
