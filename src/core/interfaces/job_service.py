"""Contract for the remote job service.

All calls are synchronous and block until the server answers. Transport
errors propagate unchanged; non-2xx answers raise `core.errors.ServiceError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ContextManager, Iterable, Protocol, Sequence, runtime_checkable

from core.domain.formats import DuplicatePolicy, TransferFormat, UuidPolicy
from core.domain.models import JobRecord, ScheduledJobRecord


@dataclass
class RawBody:
    """A response body that is streamed rather than parsed."""

    content_type: str | None
    chunks: Iterable[bytes]


@runtime_checkable
class JobService(Protocol):
    def list_jobs(
        self,
        project: str,
        *,
        job_filter: str | None = None,
        group_path: str | None = None,
    ) -> list[JobRecord]:
        """List jobs in `project` matching the name/group filters."""

        ...

    def list_jobs_by_ids(self, project: str, idlist: str) -> list[JobRecord]:
        """List jobs in `project` by comma separated ids."""

        ...

    def get_job_info(self, job_id: str) -> ScheduledJobRecord: ...

    def delete_jobs(self, ids: Sequence[str]) -> dict[str, Any]:
        """Bulk delete; returns the raw result payload."""

        ...

    def load_jobs(
        self,
        project: str,
        body: bytes,
        fmt: TransferFormat,
        duplicate: DuplicatePolicy,
        uuid_policy: UuidPolicy,
    ) -> dict[str, Any]:
        """Import definitions; returns the raw result payload."""

        ...

    def export_jobs(
        self,
        project: str,
        fmt: TransferFormat,
        *,
        idlist: str | None = None,
        job_filter: str | None = None,
        group_path: str | None = None,
    ) -> ContextManager[RawBody]:
        """Download definitions; the body is only valid inside the context."""

        ...
