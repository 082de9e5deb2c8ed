"""HTTP implementation of `core.interfaces.job_service.JobService`.

Responsibility:
- Map each service operation to its REST endpoint and query parameters.
- Turn JSON answers into domain models; bulk results stay plain dicts for
  `core.services.results`.
- Keep export responses open while the caller streams them.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Sequence

import httpx

from adapters.http_client import build_client, check_error
from core.config import AppSettings
from core.domain.formats import DuplicatePolicy, TransferFormat, UuidPolicy
from core.domain.models import JobRecord, ScheduledJobRecord
from core.errors import ServiceError
from core.interfaces.job_service import JobService, RawBody

logger = logging.getLogger(__name__)


def _params(**values: str | None) -> dict[str, str]:
    return {key: value for key, value in values.items() if value}


class JobServiceClient(JobService):
    """Talks to the job scheduling REST API."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> "JobServiceClient":
        return cls(build_client(settings, transport=transport))

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "JobServiceClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _json(self, method: str, url: str, **kwargs: Any) -> Any:
        logger.debug("%s %s params=%s", method, url, kwargs.get("params"))
        response = check_error(self._client.request(method, url, **kwargs))
        try:
            return response.json()
        except ValueError as exc:
            raise ServiceError(
                response.status_code,
                f"Expected a JSON response, got {response.headers.get('content-type')}",
            ) from exc

    def _job_list(self, url: str, params: dict[str, str]) -> list[JobRecord]:
        data = self._json("GET", url, params=params)
        if not isinstance(data, list):
            raise ServiceError(200, "Expected a list of jobs")
        return [JobRecord.model_validate(item) for item in data]

    def list_jobs(
        self,
        project: str,
        *,
        job_filter: str | None = None,
        group_path: str | None = None,
    ) -> list[JobRecord]:
        return self._job_list(
            f"project/{project}/jobs",
            _params(jobFilter=job_filter, groupPath=group_path),
        )

    def list_jobs_by_ids(self, project: str, idlist: str) -> list[JobRecord]:
        return self._job_list(f"project/{project}/jobs", _params(idlist=idlist))

    def get_job_info(self, job_id: str) -> ScheduledJobRecord:
        data = self._json("GET", f"job/{job_id}/info")
        return ScheduledJobRecord.model_validate(data)

    def delete_jobs(self, ids: Sequence[str]) -> dict[str, Any]:
        data = self._json("POST", "jobs/delete", json={"ids": list(ids)})
        return data if isinstance(data, dict) else {}

    def load_jobs(
        self,
        project: str,
        body: bytes,
        fmt: TransferFormat,
        duplicate: DuplicatePolicy,
        uuid_policy: UuidPolicy,
    ) -> dict[str, Any]:
        data = self._json(
            "POST",
            f"project/{project}/jobs/import",
            params={
                "fileformat": fmt.value,
                "dupeOption": duplicate.value,
                "uuidOption": uuid_policy.value,
            },
            content=body,
            headers={"Content-Type": fmt.media_type},
        )
        return data if isinstance(data, dict) else {}

    @contextmanager
    def export_jobs(
        self,
        project: str,
        fmt: TransferFormat,
        *,
        idlist: str | None = None,
        job_filter: str | None = None,
        group_path: str | None = None,
    ) -> Iterator[RawBody]:
        params = _params(format=fmt.value, idlist=idlist, jobFilter=job_filter, groupPath=group_path)
        url = f"project/{project}/jobs/export"
        logger.debug("GET %s params=%s (streamed)", url, params)
        with self._client.stream("GET", url, params=params, headers={"Accept": "*/*"}) as response:
            check_error(response)
            yield RawBody(
                content_type=response.headers.get("content-type"),
                chunks=response.iter_bytes(),
            )
