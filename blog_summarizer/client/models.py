"""Data models for the summarize API and the progress ledger."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SummaryResult(BaseModel):
    """Payload returned by ``POST /api/summarize`` on success."""

    model_config = ConfigDict(extra="ignore")

    id: int
    blog_url: str
    title: str
    summary_english: str
    summary_urdu: str
    created_at: str
    word_count: int
    author: Optional[str] = None


class StepStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


# Fixed pipeline stages, in display order.
STEP_LABELS: tuple[str, ...] = (
    "Scraping blog content",
    "Generating AI summary",
    "Translating to Urdu",
)


@dataclass(frozen=True)
class ProcessingStep:
    """One stage of the progress ledger."""

    step: str
    status: StepStatus = StepStatus.PENDING
    message: str | None = None

    def with_status(self, status: StepStatus, message: str | None = None) -> ProcessingStep:
        """Return a copy with *status* and *message* replaced."""
        return replace(self, status=status, message=message)

    def to_dict(self) -> dict[str, str | None]:
        return {"step": self.step, "status": self.status.value, "message": self.message}


def initial_steps() -> list[ProcessingStep]:
    """Return a fresh ledger with every stage ``pending``."""
    return [ProcessingStep(step=label) for label in STEP_LABELS]
