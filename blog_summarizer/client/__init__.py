"""Client package: summarize API contract, models and URL validation."""

from blog_summarizer.client.api import SummarizeClient
from blog_summarizer.client.errors import (
    EmptyInput,
    ErrorKind,
    InvalidUrl,
    NetworkError,
    RequestFailed,
    SubmissionError,
    SubmissionInProgress,
    UnexpectedResponse,
)
from blog_summarizer.client.models import ProcessingStep, StepStatus, SummaryResult
from blog_summarizer.client.validation import validate_url

__all__ = [
    "SummarizeClient",
    "SummaryResult",
    "ProcessingStep",
    "StepStatus",
    "ErrorKind",
    "SubmissionError",
    "EmptyInput",
    "InvalidUrl",
    "RequestFailed",
    "NetworkError",
    "UnexpectedResponse",
    "SubmissionInProgress",
    "validate_url",
]
