"""UI components for the CLI (Rich).

`ConsoleOutput` is the production `OutputSink`: rendered records go to
stdout, messages go to stderr so piped output stays clean.
"""

from __future__ import annotations

import sys
from typing import Any, Sequence

from rich.console import Console
from rich.table import Table


def build_record_table(record: dict[str, Any]) -> Table:
    """Two-column key/value table for verbose output."""

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in record.items():
        table.add_row(str(key), "" if value is None else str(value))
    return table


def build_doctor_table() -> Table:
    table = Table(title="jobctl Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


class ConsoleOutput:
    """Writes records to stdout and info/warning/error messages to stderr."""

    def __init__(self, stdout: Console | None = None, stderr: Console | None = None) -> None:
        self._out = stdout or Console(highlight=False, soft_wrap=True, emoji=False)
        self._err = stderr or Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)

    def info(self, message: str) -> None:
        self._err.print(message, markup=False)

    def warning(self, message: str) -> None:
        self._err.print(message, style="yellow", markup=False)

    def error(self, message: str) -> None:
        self._err.print(message, style="bold red", markup=False)

    def output(self, values: Sequence[str | dict[str, Any]]) -> None:
        for value in values:
            if isinstance(value, dict):
                self._out.print(build_record_table(value))
                self._out.print()
            else:
                self._out.print(value, markup=False)

    def write_raw(self, data: bytes) -> None:
        sys.stdout.flush()
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
