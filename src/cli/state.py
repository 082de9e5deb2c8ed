"""Shared CLI state passed through `typer.Context.obj`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import typer

from adapters.job_service_client import JobServiceClient
from cli.ui_components import ConsoleOutput
from core.config import AppSettings
from core.interfaces.job_service import JobService
from core.interfaces.output import OutputSink


def _prompt(message: str) -> str:
    return typer.prompt(message, default="N", show_default=False, prompt_suffix="")


@dataclass
class CliState:
    """Collaborators for one invocation; tests build their own."""

    settings: AppSettings | None = None
    service_factory: Callable[[AppSettings], JobService] | None = None
    output: OutputSink = field(default_factory=ConsoleOutput)
    prompt: Callable[[str], str] = _prompt

    def get_settings(self) -> AppSettings:
        if self.settings is None:
            self.settings = AppSettings()
        return self.settings

    def build_service(self) -> JobService:
        factory = self.service_factory or JobServiceClient.from_settings
        return factory(self.get_settings())
