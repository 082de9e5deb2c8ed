"""Error taxonomy for jobctl.

The CLI boundary maps these to exit codes. Partial failures of bulk
operations are never raised: they travel as data (`ImportOutcome`,
`DeleteOutcome`).
"""

from __future__ import annotations


class JobctlError(Exception):
    """Base class for errors raised by jobctl itself."""


class InputError(JobctlError):
    """Invalid or missing input, detected before any network call."""


class ProtocolError(JobctlError, RuntimeError):
    """The server answered with something the client did not ask for.

    Typically a content-type that does not match the requested transfer
    format. Not recoverable at this layer.
    """


class ServiceError(JobctlError):
    """The job service answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str, *, error_code: str | None = None) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.error_code = error_code
