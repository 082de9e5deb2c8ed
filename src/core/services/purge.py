"""Purge workflow: select, snapshot (optional), confirm, delete, report."""

from __future__ import annotations

import logging
from typing import Callable

from core.domain.options import PurgeOptions
from core.interfaces.job_service import JobService
from core.interfaces.output import OutputSink
from core.services.results import classify_delete
from core.services.selection import resolve_job_ids
from core.services.transfer import export_jobs

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]

CONFIRM_TOKEN = "y"


def confirmation_message(count: int) -> str:
    return f"Really delete {count} Jobs? (y/N) "


def purge_jobs(
    service: JobService,
    options: PurgeOptions,
    output: OutputSink,
    prompt: Prompt,
) -> bool:
    """Delete the selected jobs.

    When `options.file` is set, the definitions are exported there first; an
    export failure aborts the purge. Unless `options.confirm` is set, `prompt`
    must answer exactly "y" for the delete to be sent.
    """

    ids = resolve_job_ids(service, options.selection, require_filter=True)
    logger.debug("Selected %d jobs for deletion", len(ids))

    if options.file is not None:
        export_jobs(service, options, output)

    if not options.confirm:
        answer = prompt(confirmation_message(len(ids)))
        if answer != CONFIRM_TOKEN:
            output.warning(f"Not deleting {len(ids)} jobs")
            return False

    payload = service.delete_jobs(ids)
    outcome = classify_delete(payload, requested=ids)

    if outcome.all_successful:
        output.info(f"{outcome.request_count} Jobs were deleted")
        return True

    output.error(f"Failed to delete {len(outcome.failed)} Jobs")
    output.output([item.to_basic_string() for item in outcome.failed])
    return False
