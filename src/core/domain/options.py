"""Option objects for each command.

Plain dataclasses built by the CLI layer (or by tests) and validated before
any workflow touches the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from core.domain.formats import DuplicatePolicy, TransferFormat, UuidPolicy
from core.errors import InputError

STDOUT_SENTINEL = "-"


@dataclass
class JobSelection:
    """Either an explicit id-list, or a (project, name, group) query."""

    project: str | None = None
    idlist: str | None = None
    job: str | None = None
    group: str | None = None

    @property
    def has_idlist(self) -> bool:
        return bool(self.idlist and self.idlist.strip())

    @property
    def has_filter(self) -> bool:
        return bool(self.job) or bool(self.group)

    def require_project(self) -> str:
        if not self.project:
            raise InputError("a project is required (--project or JOBCTL_PROJECT)")
        return self.project


@dataclass
class OutputOptions:
    """Rendering controls shared by list, info and purge."""

    verbose: bool = False
    outformat: str | None = None

    @property
    def has_outformat(self) -> bool:
        return bool(self.outformat)


@dataclass
class ListOptions:
    selection: JobSelection = field(default_factory=JobSelection)
    output: OutputOptions = field(default_factory=OutputOptions)
    file: Path | None = None
    format: TransferFormat | None = None

    @property
    def to_stdout(self) -> bool:
        return self.file is not None and str(self.file) == STDOUT_SENTINEL

    def validate(self) -> None:
        if self.selection.has_idlist and self.selection.has_filter:
            raise InputError("use either an id-list or job/group filters, not both")
        self.selection.require_project()


@dataclass
class InfoOptions:
    id: str = ""
    output: OutputOptions = field(default_factory=OutputOptions)

    def validate(self) -> None:
        if not self.id.strip():
            raise InputError("a job id is required (--id)")


@dataclass
class LoadOptions:
    project: str | None = None
    file: Path | None = None
    format: TransferFormat | None = None
    duplicate: DuplicatePolicy = DuplicatePolicy.CREATE
    remove_uuids: bool = False
    verbose: bool = False

    @property
    def uuid_policy(self) -> UuidPolicy:
        return UuidPolicy.from_bool(self.remove_uuids)

    def resolved_format(self) -> TransferFormat:
        if self.format is not None:
            return self.format
        assert self.file is not None
        return TransferFormat.infer(self.file)

    def validate(self) -> None:
        if self.file is None:
            raise InputError("--file is required")
        if not self.file.is_file() or not _readable(self.file):
            raise InputError(f"File is not readable or does not exist: {self.file}")
        if not self.project:
            raise InputError("a project is required (--project or JOBCTL_PROJECT)")


@dataclass
class PurgeOptions(ListOptions):
    confirm: bool = False

    def validate(self) -> None:
        if self.selection.has_idlist and self.selection.has_filter:
            raise InputError("use either an id-list or job/group filters, not both")
        if not self.selection.has_idlist and not self.selection.has_filter:
            raise InputError("must specify an id-list, or job/group filter")
        if not self.selection.has_idlist or self.file is not None:
            self.selection.require_project()


def _readable(path: Path) -> bool:
    try:
        with path.open("rb"):
            return True
    except OSError:
        return False
