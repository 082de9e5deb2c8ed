"""Job selection: turn a `JobSelection` into an ordered list of ids.

Why in services:
- list, purge and the purge snapshot resolve targets the same way.
- An explicit id-list never costs a network call; a name/group query is
  answered by the service in its own order.
"""

from __future__ import annotations

import logging
import re

from core.domain.options import JobSelection
from core.errors import InputError
from core.interfaces.job_service import JobService

logger = logging.getLogger(__name__)

_IDLIST_SPLIT_RE = re.compile(r"\s*,\s*")


def split_idlist(idlist: str) -> list[str]:
    """Split a comma separated id-list, trimming whitespace around each id.

    Empty items (a trailing comma, `a,,b`) are dropped.
    """

    return [item for item in _IDLIST_SPLIT_RE.split(idlist.strip()) if item]


def split_job_name_parts(job: str) -> tuple[str | None, str]:
    """Split `group/sub/name` into (`group/sub`, `name`).

    A value without a slash has no group; a blank group becomes None.
    """

    if "/" not in job:
        return None, job
    group, name = job.rsplit("/", 1)
    if not group.strip():
        return None, name
    return group, name


def resolve_job_ids(
    service: JobService,
    selection: JobSelection,
    *,
    require_filter: bool = True,
) -> list[str]:
    """Resolve the ids targeted by `selection`.

    An explicit id-list is returned as-is with no network call. Otherwise the
    service is queried by name/group filter and ids are returned in server
    order.
    """

    if selection.has_idlist:
        assert selection.idlist is not None
        return split_idlist(selection.idlist)

    if require_filter and not selection.has_filter:
        raise InputError("must specify an id-list, or job/group filter")

    project = selection.require_project()
    logger.debug("Querying jobs project=%s job=%s group=%s", project, selection.job, selection.group)
    records = service.list_jobs(project, job_filter=selection.job, group_path=selection.group)
    return [record.id for record in records]
