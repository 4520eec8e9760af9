"""HTTP client for the external ``POST /api/summarize`` endpoint.

The endpoint is a black box that scrapes the blog, summarises it, translates
the summary to Urdu and stores the result.  This module only speaks its
contract::

    POST /api/summarize   {"url": "https://..."}
    2xx  -> SummaryResult JSON
    else -> {"error": "..."} (optional)
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from blog_summarizer.client.errors import (
    GENERIC_ERROR_MESSAGE,
    NetworkError,
    RequestFailed,
    UnexpectedResponse,
)
from blog_summarizer.client.models import SummaryResult
from blog_summarizer.config import settings
from blog_summarizer.log import log

_DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def _error_message(response: httpx.Response) -> str:
    """Return the ``error`` field of a failure body, or a status-based message."""
    try:
        body: Any = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, str) and error:
            return error
    return f"HTTP error! status: {response.status_code}"


class SummarizeClient:
    """Thin async wrapper around the summarize endpoint.

    Pass *http* to share an existing :class:`httpx.AsyncClient` (the web page
    does this); otherwise the client opens its own and closes it in
    :meth:`aclose`.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        path: str | None = None,
        timeout: float | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.path = "/" + (path or settings.summarize_path).lstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(
            headers=_DEFAULT_HEADERS,
            timeout=timeout if timeout is not None else settings.request_timeout,
        )

    @property
    def endpoint(self) -> str:
        return self.base_url + self.path

    async def send(self, url: str) -> httpx.Response:
        """POST *url* to the endpoint and return the successful response.

        Raises:
            NetworkError: If the request could not be completed.
            RequestFailed: If the endpoint answers with a non-2xx status.
        """
        log.info("POST %s url=%s", self.endpoint, url)
        try:
            response = await self._http.post(
                self.endpoint, json={"url": url}, headers=_DEFAULT_HEADERS
            )
        except httpx.HTTPError as exc:
            log.error("Request to %s failed: %r", self.endpoint, exc)
            raise NetworkError(str(exc) or GENERIC_ERROR_MESSAGE) from exc

        if not response.is_success:
            message = _error_message(response)
            log.warning("Summarize endpoint returned %s: %s", response.status_code, message)
            raise RequestFailed(message, status_code=response.status_code)

        log.info("Summarize endpoint returned %s", response.status_code)
        return response

    @staticmethod
    def parse(response: httpx.Response) -> SummaryResult:
        """Decode a successful response into a :class:`SummaryResult`.

        Raises:
            UnexpectedResponse: If the body is not JSON or misses required fields.
        """
        try:
            return SummaryResult.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            log.error("Malformed summary payload: %s", exc)
            raise UnexpectedResponse(f"Malformed summary payload: {exc}") from exc

    async def summarize(self, url: str) -> SummaryResult:
        """Send *url* and return the decoded result in one call."""
        return self.parse(await self.send(url))

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> SummarizeClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
