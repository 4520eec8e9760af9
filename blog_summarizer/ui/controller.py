"""Submission controller: the request lifecycle state machine.

One controller owns one :class:`ControllerState`.  Every transition replaces
the state value and notifies subscribers with a snapshot, so surfaces (the
CLI, the web page) can present progress without reaching into the
controller.

Lifecycle of :meth:`SubmissionController.submit`::

    validate ──fail──► error set, no request
       │
       ▼
    steps reset (all pending), step 0 processing
       │  POST /api/summarize
       ├──fail──► first processing step -> error, error set
       ▼
    step 0 completed, steps 1+2 processing
       │  decode payload
       ├──fail──► step 1 -> error, error set
       ▼
    result stored, steps 1+2 completed
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable

from blog_summarizer.client.api import SummarizeClient
from blog_summarizer.client.errors import (
    GENERIC_ERROR_MESSAGE,
    ErrorKind,
    SubmissionError,
    SubmissionInProgress,
)
from blog_summarizer.client.models import (
    ProcessingStep,
    StepStatus,
    SummaryResult,
    initial_steps,
)
from blog_summarizer.client.validation import validate_url
from blog_summarizer.log import log


@dataclass
class ControllerState:
    url: str = ""
    is_processing: bool = False
    result: SummaryResult | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None
    steps: list[ProcessingStep] = field(default_factory=list)
    show_translation: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the state as JSON-compatible data."""
        return {
            "url": self.url,
            "is_processing": self.is_processing,
            "result": self.result.model_dump() if self.result else None,
            "error": self.error,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "steps": [s.to_dict() for s in self.steps],
            "show_translation": self.show_translation,
        }


Listener = Callable[[ControllerState], None]


class SubmissionController:
    """Validates input, dispatches one request and keeps the step ledger."""

    def __init__(self, client: SummarizeClient) -> None:
        self._client = client
        self._state = ControllerState()
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------
    @property
    def state(self) -> ControllerState:
        """A snapshot of the current state."""
        return replace(self._state, steps=list(self._state.steps))

    @property
    def can_submit(self) -> bool:
        return not self._state.is_processing

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* after every transition; returns an unsubscribe callable."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _update(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)

    def _update_steps(self, changes: dict[int, tuple[StepStatus, str | None]]) -> None:
        """Apply several step changes as one transition."""
        steps = [
            step.with_status(*changes[index]) if index in changes else step
            for index, step in enumerate(self._state.steps)
        ]
        self._update(steps=steps)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def set_url(self, text: str) -> None:
        """Edit the raw URL field; allowed while a request is outstanding."""
        self._update(url=text)

    def toggle_translation(self) -> bool:
        """Flip Urdu translation visibility and return the new value."""
        self._update(show_translation=not self._state.show_translation)
        return self._state.show_translation

    async def submit(self, raw_url: str | None = None) -> ControllerState:
        """Run one submission attempt and return the settled state.

        Failures are recorded in the returned state rather than raised.

        Raises:
            SubmissionInProgress: If a previous submission has not settled.
        """
        if self._state.is_processing:
            raise SubmissionInProgress()
        if raw_url is not None:
            self._update(url=raw_url)

        try:
            url = validate_url(self._state.url)
        except SubmissionError as exc:
            log.info("Rejected input %r: %s", self._state.url, exc.message)
            self._update(error=exc.message, error_kind=exc.kind)
            return self.state

        self._update(
            error=None,
            error_kind=None,
            result=None,
            is_processing=True,
            steps=initial_steps(),
        )
        try:
            self._update_steps({0: (StepStatus.PROCESSING, "Extracting content from blog...")})
            response = await self._client.send(url)

            # No per-stage progress comes back from the server, so summary
            # and translation are shown in flight together.
            self._update_steps({0: (StepStatus.COMPLETED, "Content extracted successfully")})
            self._update_steps({
                1: (StepStatus.PROCESSING, "Generating summary..."),
                2: (StepStatus.PROCESSING, "Translating to Urdu..."),
            })

            result = self._client.parse(response)
            self._update(result=result)
            self._update_steps({
                1: (StepStatus.COMPLETED, "Summary generated"),
                2: (StepStatus.COMPLETED, "Translation completed"),
            })
            log.info("Summarized %s as result id=%s", url, result.id)
        except SubmissionError as exc:
            self._fail(exc.message, exc.kind)
        except Exception as exc:  # noqa: BLE001
            log.exception("Unexpected error while summarizing %s", url)
            self._fail(str(exc) or GENERIC_ERROR_MESSAGE, ErrorKind.NETWORK_ERROR)
        finally:
            self._update(is_processing=False)

        return self.state

    def _fail(self, message: str, kind: ErrorKind) -> None:
        log.warning("Submission failed (%s): %s", kind.value, message)
        in_flight = [
            i for i, step in enumerate(self._state.steps) if step.status is StepStatus.PROCESSING
        ]
        if in_flight:
            # Only the first in-flight step failed; later ones never settled.
            changes = {i: (StepStatus.PENDING, None) for i in in_flight[1:]}
            changes[in_flight[0]] = (StepStatus.ERROR, message)
            self._update_steps(changes)
        self._update(error=message, error_kind=kind)
