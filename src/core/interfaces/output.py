"""Contract for user-facing output."""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Three message channels plus data output.

    `output` receives rendered records (strings or maps); `write_raw` receives
    bytes destined for standard output untouched.
    """

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def output(self, values: Sequence[str | dict[str, Any]]) -> None: ...

    def write_raw(self, data: bytes) -> None: ...
