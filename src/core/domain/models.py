"""Domain models (Pydantic v2).

These describe what the job service returns, not how it is fetched. Wire
names are camelCase and mapped through aliases; every model accepts either
form (`populate_by_name`).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict


class JobRecord(BaseModel):
    """A job definition as listed by the server."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1, description="Service-assigned unique identifier.")
    name: str = Field(..., description="Job name.")
    group: str | None = Field(default=None, description="Group path (slash separated).")
    project: str | None = Field(default=None, description="Project holding the job.")
    description: str | None = None
    href: str | None = None
    permalink: str | None = None
    scheduled: bool | None = None
    schedule_enabled: bool | None = Field(default=None, alias="scheduleEnabled")
    enabled: bool | None = None

    @property
    def full_name(self) -> str:
        return f"{self.group}/{self.name}" if self.group else self.name

    def to_basic_string(self) -> str:
        text = f"{self.id} {self.full_name}"
        if self.project:
            text += f" ({self.project})"
        return text

    def to_map(self) -> dict[str, Any]:
        """Field map used for verbose output and `%field%` templates."""

        return self.model_dump(by_alias=True, exclude_none=True)


class ScheduledJobRecord(JobRecord):
    """Detailed job info (`GET /job/{id}/info`)."""

    server_node_uuid: str | None = Field(default=None, alias="serverNodeUUID")
    server_owner: bool | None = Field(default=None, alias="serverOwner")
    average_duration: int | None = Field(default=None, alias="averageDuration")
    next_scheduled_execution: str | None = Field(default=None, alias="nextScheduledExecution")


class JobLoadItem(BaseModel):
    """One entry of an import result."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    index: int | None = Field(default=None, description="Position of the definition in the uploaded file.")
    id: str | None = None
    name: str | None = None
    group: str | None = None
    project: str | None = None
    href: str | None = None
    permalink: str | None = None
    error: str | None = None

    def to_basic_string(self) -> str:
        parts: list[str] = []
        if self.id:
            parts.append(f"[{self.id}] ")
        if self.group:
            parts.append(f"{self.group}/")
        parts.append(self.name or "")
        if self.error:
            parts.append(f" : {self.error}")
        return "".join(parts)

    def to_map(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ImportOutcome(BaseModel):
    """Disjoint partitions of an import request."""

    succeeded: list[JobLoadItem] = Field(default_factory=list)
    skipped: list[JobLoadItem] = Field(default_factory=list)
    failed: list[JobLoadItem] = Field(default_factory=list)

    @property
    def successful(self) -> bool:
        return not self.failed

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.skipped) + len(self.failed)


class DeleteItem(BaseModel):
    """One entry of a bulk delete result."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: str | None = Field(default=None, description="Job id; the server may omit it on failures.")
    error_code: str | None = Field(default=None, alias="errorCode")
    message: str | None = None

    def to_basic_string(self) -> str:
        """`"[id] message"`; the error code stands in for a missing message."""

        detail = self.message or self.error_code or ""
        return f"[{self.id or '?'}] {detail}".rstrip()


class DeleteOutcome(BaseModel):
    """Result of a bulk delete.

    `all_successful` is derived from `failed`, never taken from the server.
    """

    model_config = ConfigDict(populate_by_name=True)

    request_count: int = Field(default=0, ge=0, alias="requestCount")
    succeeded: list[DeleteItem] = Field(default_factory=list)
    failed: list[DeleteItem] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_successful(self) -> bool:
        return not self.failed
