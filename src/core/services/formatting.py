"""Rendering of job records and operation summaries.

Three mutually exclusive policies, checked in order: verbose (full maps),
custom template (`%field%` substitution), default (basic one-line string).
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Protocol

from core.domain.options import OutputOptions

# `%name%` and the shorter `%name` form are both accepted.
_PLACEHOLDER_RE = re.compile(r"%([\w.]+)%?")


class Renderable(Protocol):
    def to_basic_string(self) -> str: ...

    def to_map(self) -> dict[str, Any]: ...


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    if key in data:
        return data[key]
    value: Any = data
    for part in key.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return None
        value = value[part]
    return value


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_template(template: str, data: Mapping[str, Any]) -> str:
    """Substitute `%field%` placeholders; unknown fields render as ''."""

    return _PLACEHOLDER_RE.sub(lambda m: _to_text(_lookup(data, m.group(1))), template)


def render_records(
    records: Iterable[Renderable],
    options: OutputOptions,
) -> list[str | dict[str, Any]]:
    if options.verbose:
        return [record.to_map() for record in records]
    if options.has_outformat:
        assert options.outformat is not None
        return [format_template(options.outformat, record.to_map()) for record in records]
    return [record.to_basic_string() for record in records]


def render_load_items(records: Iterable[Renderable], *, verbose: bool) -> list[str | dict[str, Any]]:
    return render_records(records, OutputOptions(verbose=verbose))


def count_message(count: int, title: str) -> str:
    """`"3 Jobs Succeeded:"` style header."""

    return f"{count} Jobs {title}:"
