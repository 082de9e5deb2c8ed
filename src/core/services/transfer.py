"""Transfer workflows: load (import), list/export and info.

Responsibility:
- Pick the request (by id-list or by filter) and the definition format.
- Check that a raw export carries the requested media type before any byte
  is written.
- Stream export bodies to a file or stdout and report the byte count.

Side effects (printing) go through the `OutputSink` only.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence

from core.domain.formats import TransferFormat
from core.domain.models import JobLoadItem
from core.domain.options import InfoOptions, ListOptions, LoadOptions
from core.errors import ProtocolError
from core.interfaces.job_service import JobService, RawBody
from core.interfaces.output import OutputSink
from core.services.formatting import count_message, render_load_items, render_records
from core.services.results import classify_import

logger = logging.getLogger(__name__)


def check_content_type(requested: TransferFormat | None, content_type: str | None) -> TransferFormat:
    """Ensure a raw export body carries the requested format.

    yaml requires a YAML media type; anything else (or nothing) requires XML.
    """

    expected = requested or TransferFormat.default()
    if not expected.accepts(content_type):
        raise ProtocolError(f"Unexpected response format: {content_type}")
    return expected


def _copy_chunks(body: RawBody, write: Callable[[bytes], object]) -> int:
    total = 0
    for chunk in body.chunks:
        if not chunk:
            continue
        write(chunk)
        total += len(chunk)
    return total


def export_jobs(service: JobService, options: ListOptions, output: OutputSink) -> int:
    """Download definitions for the selection into `options.file` (or stdout).

    Returns the number of bytes written.
    """

    assert options.file is not None
    selection = options.selection
    project = selection.require_project()
    fmt = options.format or TransferFormat.default()

    if selection.has_idlist:
        ctx = service.export_jobs(project, fmt, idlist=selection.idlist)
    else:
        ctx = service.export_jobs(project, fmt, job_filter=selection.job, group_path=selection.group)

    with ctx as body:
        check_content_type(options.format, body.content_type)
        if options.to_stdout:
            total = _copy_chunks(body, output.write_raw)
            destination = "stdout"
        else:
            with Path(options.file).open("wb") as handle:
                total = _copy_chunks(body, handle.write)
            destination = f"file {options.file}"

    logger.debug("Exported %d bytes (%s) to %s", total, body.content_type, destination)
    if not options.output.has_outformat:
        output.info(f"Wrote {total} bytes of {body.content_type} to {destination}")
    return total


def list_jobs(service: JobService, options: ListOptions, output: OutputSink) -> bool:
    """List jobs, or download their definitions when a file was requested."""

    if options.file is not None:
        export_jobs(service, options, output)
        return True

    selection = options.selection
    project = selection.require_project()
    if selection.has_idlist:
        assert selection.idlist is not None
        records = service.list_jobs_by_ids(project, selection.idlist)
    else:
        records = service.list_jobs(project, job_filter=selection.job, group_path=selection.group)

    if not options.output.has_outformat:
        output.info(f"{len(records)} Jobs in project {project}")
    output.output(render_records(records, options.output))
    return True


def job_info(service: JobService, options: InfoOptions, output: OutputSink) -> bool:
    record = service.get_job_info(options.id.strip())
    output.output(render_records([record], options.output))
    return True


def _print_load_result(
    items: Sequence[JobLoadItem],
    title: str,
    output: OutputSink,
    notify: Callable[[str], None],
    *,
    verbose: bool,
) -> None:
    if not items:
        return
    notify(count_message(len(items), title))
    output.output(render_load_items(items, verbose=verbose))


def load_jobs(service: JobService, options: LoadOptions, output: OutputSink) -> bool:
    """Import definitions from a file; succeeds iff nothing failed."""

    assert options.file is not None and options.project is not None
    fmt = options.resolved_format()
    body = options.file.read_bytes()
    logger.debug(
        "Importing %d bytes of %s into %s (dupe=%s uuid=%s)",
        len(body),
        fmt.value,
        options.project,
        options.duplicate.value,
        options.uuid_policy.value,
    )

    payload = service.load_jobs(options.project, body, fmt, options.duplicate, options.uuid_policy)
    outcome = classify_import(payload)

    _print_load_result(outcome.succeeded, "Succeeded", output, output.info, verbose=options.verbose)
    _print_load_result(outcome.skipped, "Skipped", output, output.warning, verbose=options.verbose)
    _print_load_result(outcome.failed, "Failed", output, output.error, verbose=options.verbose)
    return outcome.successful
