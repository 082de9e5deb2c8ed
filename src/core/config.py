"""Configuration for jobctl.

Why here:
- Environment variables (`JOBCTL_*`) and `.env` files are read in one place
  with pydantic-settings, so the CLI never touches `os.environ` directly.
- Adapters (HTTP client) and the doctor command read the same `AppSettings`.

The project `.env` is read first, then the per-user one written by
`jobctl doctor setup`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "jobctl"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "jobctl"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "jobctl"
    return Path.home() / ".config" / "jobctl"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    """Read `KEY=value` pairs; comments, blank and malformed lines are skipped."""

    pairs: dict[str, str] = {}
    for line in map(str.strip, text.splitlines()):
        if line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if sep and key:
            pairs[key] = value.strip().strip("\"'")
    return pairs


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env file.

    Existing keys not present in `values` are kept. `None` values are ignored.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# jobctl user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix="JOBCTL_",
        extra="ignore",
        case_sensitive=False,
        # Project file first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    url: str = Field(
        default="http://localhost:4440",
        min_length=8,
        description="Base URL of the job scheduling service.",
    )
    api_version: int = Field(
        default=41,
        ge=18,
        description="API version used in the request path (/api/<version>/...).",
    )
    auth_token: str | None = Field(
        default=None,
        description="API token sent as X-Rundeck-Auth-Token.",
    )
    project: str | None = Field(
        default=None,
        description="Default project when --project is not given.",
    )
    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="jobctl/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Diagnostic log level (DEBUG, INFO, WARNING, ERROR).",
    )
