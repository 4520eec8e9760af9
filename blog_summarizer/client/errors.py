"""Error taxonomy for a single submission attempt."""

from __future__ import annotations

from enum import Enum

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


class ErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    INVALID_URL = "invalid_url"
    REQUEST_FAILED = "request_failed"
    NETWORK_ERROR = "network_error"


class SubmissionError(Exception):
    """Base class for every failure a submission can end with."""

    kind: ErrorKind = ErrorKind.NETWORK_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyInput(SubmissionError):
    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str = "Please enter a blog URL") -> None:
        super().__init__(message)


class InvalidUrl(SubmissionError):
    kind = ErrorKind.INVALID_URL

    def __init__(
        self,
        message: str = "Please enter a valid URL (must start with http:// or https://)",
    ) -> None:
        super().__init__(message)


class RequestFailed(SubmissionError):
    """The summarize endpoint answered with a non-2xx status."""

    kind = ErrorKind.REQUEST_FAILED

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class NetworkError(SubmissionError):
    """Transport failure, or anything else that went wrong unexpectedly."""

    kind = ErrorKind.NETWORK_ERROR


class UnexpectedResponse(NetworkError):
    """A 2xx response whose body is not a valid summary payload."""


class SubmissionInProgress(SubmissionError):
    """Raised when a submission is attempted while another is outstanding.

    Not recorded in controller state; the caller should have kept the submit
    control disabled.
    """

    def __init__(self, message: str = "A submission is already in progress") -> None:
        super().__init__(message)
