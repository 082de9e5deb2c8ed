"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console

from adapters.http_client import build_client, check_error
from cli.state import CliState
from cli.ui_components import build_doctor_table
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = check_error(client.get("system/info"))
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _settings(ctx: typer.Context) -> AppSettings:
    if isinstance(ctx.obj, CliState):
        return ctx.obj.get_settings()
    return AppSettings()


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = _settings(ctx)
    table = build_doctor_table()

    table.add_row("Server URL", "OK", settings.url)
    table.add_row("API version", "OK", str(settings.api_version))
    if settings.auth_token:
        table.add_row("Auth token", "OK", "Token configured")
    else:
        table.add_row("Auth token", "MISSING", "Set JOBCTL_AUTH_TOKEN or run `jobctl doctor setup`")
    table.add_row("Default project", "OK" if settings.project else "OPTIONAL", settings.project or "-")

    ok_api, detail_api = _check_api(settings)
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        raise typer.Exit(1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()
    url = typer.prompt("Server URL", default=current.url, show_default=True).strip()
    token = typer.prompt("API token", hide_input=True, confirmation_prompt=False).strip()
    project = typer.prompt("Default project", default=current.project or "", show_default=True).strip()

    if not url or not token:
        raise typer.BadParameter("url and token are required")

    env_path = write_user_env_vars(
        {
            "JOBCTL_URL": url,
            "JOBCTL_AUTH_TOKEN": token,
            "JOBCTL_PROJECT": project or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
