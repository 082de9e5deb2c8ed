"""httpx wrapper.

Why in adapters:
- Base URL, API version, timeouts and the auth header are transport details;
  the core only sees `JobService`.
- Every call to the job service goes through `build_client`, and every
  non-2xx answer through `check_error`.

Tests pass their own `transport` (`httpx.MockTransport`).
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import AppSettings
from core.errors import ServiceError

AUTH_TOKEN_HEADER = "X-Rundeck-Auth-Token"


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create a synchronous `httpx.Client` rooted at `<url>/api/<version>/`."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.auth_token:
        headers[AUTH_TOKEN_HEADER] = settings.auth_token
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=f"{settings.url.rstrip('/')}/api/{settings.api_version}/",
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _error_message(response: httpx.Response) -> tuple[str, str | None]:
    try:
        data: Any = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"]), data.get("errorCode")
    text = response.text.strip()
    return text or response.reason_phrase, None


def check_error(response: httpx.Response) -> httpx.Response:
    """Raise `ServiceError` for non-2xx responses, return the response otherwise."""

    if response.is_success:
        return response
    if not response.is_stream_consumed:
        response.read()
    message, error_code = _error_message(response)
    raise ServiceError(response.status_code, message, error_code=error_code)
