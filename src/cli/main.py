"""jobctl command line entry point."""

from __future__ import annotations

from typing import Optional

import typer

from cli import doctor, jobs
from cli.logging_setup import configure_logging
from cli.state import CliState
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Manage job definitions on a remote scheduling service.")
app.add_typer(jobs.app, name="jobs")
app.add_typer(doctor.app, name="doctor")


@app.callback()
def main(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(None, "--url", envvar="JOBCTL_URL", help="Server base URL."),
    token: Optional[str] = typer.Option(
        None, "--token", envvar="JOBCTL_AUTH_TOKEN", help="API token.", show_default=False
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", envvar="JOBCTL_LOG_LEVEL", help="Diagnostic log level (DEBUG, INFO, WARNING, ERROR)."
    ),
) -> None:
    state = ctx.obj if isinstance(ctx.obj, CliState) else CliState()
    ctx.obj = state

    if state.settings is None:
        overrides = {key: value for key, value in {"url": url, "auth_token": token}.items() if value}
        state.settings = AppSettings(**overrides)
    configure_logging(log_level or state.settings.log_level)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
