"""`jobctl jobs ...` commands: list, info, load, purge."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

import httpx
import typer

from cli.state import CliState
from core.domain.formats import DuplicatePolicy, TransferFormat
from core.domain.options import (
    InfoOptions,
    JobSelection,
    ListOptions,
    LoadOptions,
    OutputOptions,
    PurgeOptions,
)
from core.errors import InputError, JobctlError
from core.interfaces.job_service import JobService
from core.interfaces.output import OutputSink
from core.services.purge import purge_jobs
from core.services.selection import split_job_name_parts
from core.services.transfer import job_info, list_jobs, load_jobs

app = typer.Typer(no_args_is_help=True, help="List and manage Jobs.")

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INPUT_ERROR = 2

Workflow = Callable[[JobService, Any, OutputSink, CliState], bool]

WORKFLOWS: dict[str, Workflow] = {
    "list": lambda service, options, output, state: list_jobs(service, options, output),
    "info": lambda service, options, output, state: job_info(service, options, output),
    "load": lambda service, options, output, state: load_jobs(service, options, output),
    "purge": lambda service, options, output, state: purge_jobs(service, options, output, state.prompt),
}


def _state(ctx: typer.Context) -> CliState:
    if not isinstance(ctx.obj, CliState):
        ctx.obj = CliState()
    return ctx.obj


def _close(service: JobService) -> None:
    close = getattr(service, "close", None)
    if callable(close):
        close()


def execute(ctx: typer.Context, command: str, options: Any) -> None:
    """Validate `options`, run the workflow and map the result to an exit code."""

    state = _state(ctx)
    output = state.output
    try:
        options.validate()
        service = state.build_service()
        try:
            ok = WORKFLOWS[command](service, options, output, state)
        finally:
            _close(service)
    except InputError as exc:
        output.error(f"Input error: {exc}")
        raise typer.Exit(EXIT_INPUT_ERROR) from None
    except (JobctlError, httpx.HTTPError, OSError) as exc:
        logger.debug("%s failed", command, exc_info=True)
        output.error(f"Error: {exc}")
        raise typer.Exit(EXIT_FAILURE) from None
    if not ok:
        raise typer.Exit(EXIT_FAILURE)


def _selection(
    ctx: typer.Context,
    project: Optional[str],
    idlist: Optional[str],
    job: Optional[str],
    group: Optional[str],
    job_path: Optional[str],
) -> JobSelection:
    if job_path:
        if job or group:
            raise typer.BadParameter("--job-path cannot be combined with --job/--group", param_hint="--job-path")
        group, job = split_job_name_parts(job_path)
    return JobSelection(
        project=project or _state(ctx).get_settings().project,
        idlist=idlist,
        job=job,
        group=group,
    )


_PROJECT = typer.Option(None, "--project", "-p", help="Project name (defaults to JOBCTL_PROJECT).")
_IDLIST = typer.Option(None, "--idlist", "-i", help="Comma separated list of Job IDs.")
_JOB = typer.Option(None, "--job", "-j", help="Job name filter.")
_GROUP = typer.Option(None, "--group", "-g", help="Job group path filter.")
_JOB_PATH = typer.Option(None, "--job-path", "-J", help="Job given as group/name; fills --group and --job.")
_FILE = typer.Option(None, "--file", "-f", help="File path to write definitions to, or '-' for stdout.")
_FORMAT = typer.Option(None, "--format", "-F", case_sensitive=False, help="Definition format (xml or yaml).")
_OUTFORMAT = typer.Option(None, "--outformat", "-%", help="Output template using %field% placeholders.")
_VERBOSE = typer.Option(False, "--verbose", "-v", help="Show full records.")


@app.command("list")
def list_command(
    ctx: typer.Context,
    project: Optional[str] = _PROJECT,
    idlist: Optional[str] = _IDLIST,
    job: Optional[str] = _JOB,
    group: Optional[str] = _GROUP,
    job_path: Optional[str] = _JOB_PATH,
    file: Optional[Path] = _FILE,
    format: Optional[TransferFormat] = _FORMAT,
    outformat: Optional[str] = _OUTFORMAT,
    verbose: bool = _VERBOSE,
) -> None:
    """List jobs found in a project, or download Job definitions (-f)."""

    options = ListOptions(
        selection=_selection(ctx, project, idlist, job, group, job_path),
        output=OutputOptions(verbose=verbose, outformat=outformat),
        file=file,
        format=format,
    )
    execute(ctx, "list", options)


@app.command("info")
def info_command(
    ctx: typer.Context,
    id: str = typer.Option(..., "--id", "-i", help="Job ID."),
    outformat: Optional[str] = _OUTFORMAT,
    verbose: bool = _VERBOSE,
) -> None:
    """Get info about a Job by ID."""

    options = InfoOptions(id=id, output=OutputOptions(verbose=verbose, outformat=outformat))
    execute(ctx, "info", options)


@app.command("load")
def load_command(
    ctx: typer.Context,
    project: Optional[str] = _PROJECT,
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="File path of the definitions to load."),
    format: Optional[TransferFormat] = typer.Option(
        None,
        "--format",
        "-F",
        case_sensitive=False,
        help="Definition format (xml or yaml); inferred from the file extension when omitted.",
    ),
    duplicate: DuplicatePolicy = typer.Option(
        DuplicatePolicy.CREATE,
        "--duplicate",
        "-d",
        case_sensitive=False,
        help="Behavior when uploading a job that already exists.",
    ),
    remove_uuids: bool = typer.Option(False, "--remove-uuids", "-r", help="Remove UUIDs when loading."),
    verbose: bool = _VERBOSE,
) -> None:
    """Load Job definitions from a file in XML or YAML format."""

    options = LoadOptions(
        project=project or _state(ctx).get_settings().project,
        file=file,
        format=format,
        duplicate=duplicate,
        remove_uuids=remove_uuids,
        verbose=verbose,
    )
    execute(ctx, "load", options)


@app.command("purge")
def purge_command(
    ctx: typer.Context,
    project: Optional[str] = _PROJECT,
    idlist: Optional[str] = _IDLIST,
    job: Optional[str] = _JOB,
    group: Optional[str] = _GROUP,
    job_path: Optional[str] = _JOB_PATH,
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Save the definitions to this file ('-' for stdout) before deleting."
    ),
    format: Optional[TransferFormat] = _FORMAT,
    outformat: Optional[str] = _OUTFORMAT,
    verbose: bool = _VERBOSE,
    confirm: bool = typer.Option(False, "--confirm", "-y", help="Force confirmation of delete request."),
) -> None:
    """Delete jobs matching the query parameters.

    Optionally save the definitions to a file before deleting from the server.
    --idlist/-i, or --job/-j or --group/-g options are required.
    """

    options = PurgeOptions(
        selection=_selection(ctx, project, idlist, job, group, job_path),
        output=OutputOptions(verbose=verbose, outformat=outformat),
        file=file,
        format=format,
        confirm=confirm,
    )
    execute(ctx, "purge", options)
