"""Shared fixtures: in-memory job service and a recording output sink."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Sequence

import pytest

from core.domain.formats import DuplicatePolicy, TransferFormat, UuidPolicy
from core.domain.models import JobRecord, ScheduledJobRecord
from core.interfaces.job_service import RawBody


class FakeJobService:
    """Records every call and answers from canned data."""

    def __init__(
        self,
        *,
        jobs: Sequence[JobRecord] = (),
        delete_result: dict[str, Any] | None = None,
        import_result: dict[str, Any] | None = None,
        export_body: bytes = b"<joblist/>",
        export_content_type: str | None = "application/xml;charset=UTF-8",
    ) -> None:
        self.jobs = list(jobs)
        self.delete_result = delete_result
        self.import_result = import_result or {}
        self.export_body = export_body
        self.export_content_type = export_content_type
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def calls_to(self, name: str) -> list[dict[str, Any]]:
        return [kwargs for call, kwargs in self.calls if call == name]

    def list_jobs(self, project, *, job_filter=None, group_path=None):
        self.calls.append(("list_jobs", {"project": project, "job_filter": job_filter, "group_path": group_path}))
        return list(self.jobs)

    def list_jobs_by_ids(self, project, idlist):
        self.calls.append(("list_jobs_by_ids", {"project": project, "idlist": idlist}))
        wanted = [i.strip() for i in idlist.split(",")]
        return [job for job in self.jobs if job.id in wanted]

    def get_job_info(self, job_id):
        self.calls.append(("get_job_info", {"job_id": job_id}))
        for job in self.jobs:
            if job.id == job_id:
                return ScheduledJobRecord.model_validate(job.to_map())
        raise KeyError(job_id)

    def delete_jobs(self, ids):
        self.calls.append(("delete_jobs", {"ids": list(ids)}))
        if self.delete_result is not None:
            return self.delete_result
        return {
            "requestCount": len(ids),
            "allsuccessful": True,
            "succeeded": [{"id": i, "message": "deleted"} for i in ids],
            "failed": [],
        }

    def load_jobs(self, project, body, fmt: TransferFormat, duplicate: DuplicatePolicy, uuid_policy: UuidPolicy):
        self.calls.append(
            (
                "load_jobs",
                {"project": project, "body": body, "fmt": fmt, "duplicate": duplicate, "uuid_policy": uuid_policy},
            )
        )
        return self.import_result

    @contextmanager
    def export_jobs(self, project, fmt, *, idlist=None, job_filter=None, group_path=None) -> Iterator[RawBody]:
        self.calls.append(
            (
                "export_jobs",
                {"project": project, "fmt": fmt, "idlist": idlist, "job_filter": job_filter, "group_path": group_path},
            )
        )
        body = self.export_body
        yield RawBody(content_type=self.export_content_type, chunks=iter([body[:4], body[4:]]))


class RecordingOutput:
    def __init__(self) -> None:
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.values: list[Any] = []
        self.raw = bytearray()

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def output(self, values) -> None:
        self.values.extend(values)

    def write_raw(self, data: bytes) -> None:
        self.raw.extend(data)


@pytest.fixture
def jobs() -> list[JobRecord]:
    return [
        JobRecord(id="a", name="backup", group="ops/db", project="demo"),
        JobRecord(id="b", name="deploy", group=None, project="demo"),
        JobRecord(id="c", name="cleanup", group="ops", project="demo", description="nightly"),
    ]


@pytest.fixture
def service(jobs) -> FakeJobService:
    return FakeJobService(jobs=jobs)


@pytest.fixture
def output() -> RecordingOutput:
    return RecordingOutput()
