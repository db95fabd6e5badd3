from __future__ import annotations

from dataclasses import dataclass

import typer

from grease.core.config import Settings, load_settings
from grease.core.errors import ErrorCode
from grease.core.result import Err
from grease.github.http import HttpClient, RealHttpClient
from grease.github.releases import ReleaseClient
from grease.output.console import ConsoleProtocol, RichConsole
from grease.services.release import RunOptions


@dataclass(frozen=True, slots=True)
class CLIContext:
    options: RunOptions
    settings: Settings
    console: ConsoleProtocol
    client: ReleaseClient


def make_console() -> ConsoleProtocol:
    return RichConsole()


def make_http_client() -> HttpClient:
    return RealHttpClient()


def run_options(ctx: typer.Context) -> RunOptions:
    """Global flags stored by the app callback (defaults when run standalone)."""
    root = ctx.find_root()
    options = root.obj if isinstance(root.obj, RunOptions) else None
    return options or RunOptions()


def build_context(ctx: typer.Context) -> CLIContext:
    console = make_console()

    settings_result = load_settings()
    if isinstance(settings_result, Err):
        console.error(settings_result.error.message)
        raise typer.Exit(code=int(ErrorCode.USAGE_ERROR))
    settings = settings_result.value

    return CLIContext(
        options=run_options(ctx),
        settings=settings,
        console=console,
        client=ReleaseClient(make_http_client(), settings),
    )
